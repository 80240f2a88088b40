import os
from dotenv import load_dotenv

load_dotenv()

NANGO_HOST = os.getenv("NANGO_HOST", "https://api.nango.dev")
NANGO_SECRET_KEY = os.getenv("NANGO_SECRET_KEY")
NANGO_RECORD_LIMIT = int(os.getenv("NANGO_RECORD_LIMIT", "1000"))

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", "integrations")

ZOHO_CRM_DOMAIN = os.getenv("ZOHO_CRM_DOMAIN", "com")
ZOHO_CRM_ORG_ID = os.getenv("ZOHO_CRM_ORG_ID", "")
SALESFORCE_INSTANCE_URL = os.getenv("SALESFORCE_INSTANCE_URL", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
