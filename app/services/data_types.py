import copy
import logging

logger = logging.getLogger(__name__)

# Nango model to pull for each provider config key
PROVIDER_MODELS = {
    "google-drive": "Document",
    "zoho-crm": "Account",
    "github": "GithubRepo",
    "github-getting-started": "GithubRepo",
    "google-calendar": "Event",
    "google-calendar-getting-started": "Event",
    "slack": "SlackUser",
    "one-drive": "OneDriveFileSelection",
    "one-drive-personal": "OneDriveFileSelection",
}


def _data_type(key, label, description, enabled=True, include_in_sitemap=True, coming_soon=False):
    entry = {
        "key": key,
        "label": label,
        "description": description,
        "enabled": enabled,
        "include_in_sitemap": include_in_sitemap,
    }
    if coming_soon:
        entry["coming_soon"] = True
    return entry


PROVIDER_DATA_TYPES = {
    "google-drive": {
        "provider": "google-drive",
        "display_name": "Google Drive",
        "data_types": [
            _data_type("files", "Files & Documents", "Sync Google Drive files and folders"),
        ],
    },
    "slack": {
        "provider": "slack",
        "display_name": "Slack",
        "data_types": [
            _data_type("users", "Users", "Sync Slack workspace users"),
            _data_type("channels", "Channels", "Sync public channels",
                       enabled=False, include_in_sitemap=False, coming_soon=True),
        ],
    },
    "salesforce": {
        "provider": "salesforce",
        "display_name": "Salesforce",
        "data_types": [
            _data_type("accounts", "Accounts", "Sync Salesforce accounts"),
            _data_type("contacts", "Contacts", "Sync Salesforce contacts"),
            _data_type("opportunities", "Opportunities", "Sync sales opportunities",
                       enabled=False, include_in_sitemap=False, coming_soon=True),
        ],
    },
    "zoho-crm": {
        "provider": "zoho-crm",
        "display_name": "Zoho CRM",
        "data_types": [
            _data_type("accounts", "Accounts", "Sync Zoho CRM accounts"),
            _data_type("contacts", "Contacts", "Sync Zoho CRM contacts"),
        ],
    },
    "workday": {
        "provider": "workday",
        "display_name": "Workday",
        "data_types": [
            _data_type("employees", "Employees", "Sync employee directory"),
        ],
    },
    "github": {
        "provider": "github",
        "display_name": "GitHub",
        "data_types": [
            _data_type("repositories", "Repositories", "Sync GitHub repositories"),
            _data_type("issues", "Issues", "Sync repository issues",
                       enabled=False, include_in_sitemap=False, coming_soon=True),
        ],
    },
    "google-calendar": {
        "provider": "google-calendar",
        "display_name": "Google Calendar",
        "data_types": [
            _data_type("events", "Events", "Sync calendar events", include_in_sitemap=False),
        ],
    },
}


# normalized object type -> data type key, per provider
DATA_TYPE_KEYS = {
    "google-drive": {"file": "files", "folder": "files"},
    "slack": {"contact": "users", "channel": "channels"},
    "salesforce": {"account": "accounts", "contact": "contacts", "opportunity": "opportunities"},
    "zoho-crm": {"account": "accounts", "contact": "contacts"},
    "workday": {"employee": "employees"},
    "github": {"repository": "repositories", "issue": "issues"},
    "google-calendar": {"event": "events"},
}


def get_model_for_provider(provider: str) -> str | None:
    return PROVIDER_MODELS.get(provider)


def get_default_sync_config(provider: str) -> dict:
    provider_config = PROVIDER_DATA_TYPES.get(provider)
    if not provider_config:
        return {}
    return {dt["key"]: copy.deepcopy(dt) for dt in provider_config["data_types"]}


def data_type_key_for(provider: str, object_type: str) -> str | None:
    return DATA_TYPE_KEYS.get(provider, {}).get(object_type)


def should_sync_data_type(store, provider: str, connection_id: str, object_type: str) -> bool:
    key = data_type_key_for(provider, object_type)
    if key is None:
        return True

    try:
        stored = store.get_sync_config(connection_id, provider)
    except Exception as e:
        logger.error(f"❌ Error checking sync config for {provider}/{object_type}: {e}")
        return True

    if stored and stored.get("sync_config"):
        sync_config = stored["sync_config"]
    else:
        sync_config = get_default_sync_config(provider)

    entry = sync_config.get(key)
    if not isinstance(entry, dict):
        return True
    enabled = entry.get("enabled")
    return True if enabled is None else bool(enabled)
