from app.core import config


def _first(record: dict, *keys, default=None):
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return default


def _nested(record: dict, key: str, inner: str):
    value = record.get(key)
    if isinstance(value, dict):
        return value.get(inner) or None
    return None


def _normalized(type_, title, description=None, source_url=None, mime_type=None, metadata=None) -> dict:
    return {
        "type": type_,
        "title": title,
        "description": description,
        "source_url": source_url,
        "mime_type": mime_type,
        "metadata_normalized": metadata or {},
    }


def google_drive(record: dict) -> dict:
    mime_type = record.get("mimeType") or None
    title = _first(record, "title", "name", default="Untitled")
    return _normalized(
        "folder" if mime_type == "application/vnd.google-apps.folder" else "file",
        title,
        description=record.get("description") or None,
        source_url=_first(record, "url", "webViewLink"),
        mime_type=mime_type,
        metadata={
            "fileName": title,
            "mimeType": mime_type,
            "size": record.get("size") or None,
            "modifiedTime": _first(record, "modifiedTime", "updatedAt"),
        },
    )


def _salesforce_name(record: dict) -> str:
    if record.get("Name"):
        return record["Name"]
    full = f"{record.get('FirstName') or ''} {record.get('LastName') or ''}".strip()
    return full or "Untitled"


def salesforce(record: dict) -> dict:
    sf_id = _first(record, "Id", "id")
    source_url = f"{config.SALESFORCE_INSTANCE_URL}/{sf_id}" if config.SALESFORCE_INSTANCE_URL else None
    metadata = {"salesforceId": sf_id, "owner": record.get("Owner") or None}

    attr_type = _nested(record, "attributes", "type")
    if attr_type:
        attr_type = attr_type.lower()
        if attr_type == "account":
            type_, title = "account", record.get("Name") or "Untitled"
            metadata.update(
                industry=record.get("Industry") or None,
                phone=record.get("Phone") or None,
                website=record.get("Website") or None,
            )
        elif attr_type == "contact":
            type_, title = "contact", _salesforce_name(record)
            metadata.update(
                email=record.get("Email") or None,
                phone=record.get("Phone") or None,
                account=_nested(record, "Account", "Name"),
            )
        elif attr_type == "opportunity":
            type_, title = "opportunity", record.get("Name") or "Untitled"
            metadata.update(
                amount=record.get("Amount") or None,
                stage=record.get("StageName") or None,
                closeDate=record.get("CloseDate") or None,
                account=_nested(record, "Account", "Name"),
            )
        else:
            type_, title = attr_type, _first(record, "Name", "Title", default="Untitled")
    elif record.get("StageName"):
        type_, title = "opportunity", record.get("Name") or "Untitled"
    elif record.get("Industry"):
        type_, title = "account", record.get("Name") or "Untitled"
    else:
        type_, title = "contact", _salesforce_name(record)

    return _normalized(
        type_, title,
        description=record.get("Description") or None,
        source_url=source_url,
        metadata=metadata,
    )


def github(record: dict) -> dict:
    source_url = record.get("html_url") or None
    # issues carry a number and a state; everything else is a repository
    if record.get("number") and record.get("state"):
        return _normalized(
            "issue",
            record.get("title") or "Untitled",
            description=record.get("body") or None,
            source_url=source_url,
            metadata={
                "state": record.get("state") or "open",
                "number": record.get("number") or None,
                "author": _nested(record, "user", "login"),
                "repository": _nested(record, "repository", "full_name"),
            },
        )
    return _normalized(
        "repository",
        _first(record, "full_name", "name", default="Untitled"),
        description=record.get("description") or None,
        source_url=source_url,
        metadata={
            "stars": record.get("stargazers_count") or 0,
            "language": record.get("language") or None,
            "isPrivate": record.get("private") or False,
        },
    )


def _zoho_value(field):
    if not field:
        return None
    if isinstance(field, str):
        return field
    if isinstance(field, dict) and field.get("name"):
        return field["name"]
    return None


def _zoho_url(tab: str, record_id) -> str | None:
    if not config.ZOHO_CRM_ORG_ID:
        return None
    return f"https://crm.zoho.{config.ZOHO_CRM_DOMAIN}/crm/{config.ZOHO_CRM_ORG_ID}/tab/{tab}/{record_id}"


def zoho(record: dict) -> dict:
    record_id = record.get("id")
    type_, title, source_url = "contact", "Untitled", None
    metadata = {"zohoId": record_id, "owner": record.get("Owner") or None}

    if "Account_Name" in record and "Deal_Name" not in record:
        if "Industry" in record:
            type_ = "account"
            title = _zoho_value(record["Account_Name"]) or record.get("name") or "Untitled"
            source_url = _zoho_url("Accounts", record_id)
            metadata.update(
                industry=_zoho_value(record.get("Industry")),
                phone=_zoho_value(record.get("Phone")),
                website=_zoho_value(record.get("Website")),
            )
        else:
            title = _zoho_value(record.get("Full_Name")) or record.get("name") or "Untitled"
            source_url = _zoho_url("Contacts", record_id)
            metadata.update(
                email=_zoho_value(record.get("Email")),
                phone=_zoho_value(record.get("Phone")),
                account=_zoho_value(record["Account_Name"]),
            )
    elif "Deal_Name" in record:
        type_ = "deal"
        title = _zoho_value(record["Deal_Name"]) or record.get("name") or "Untitled"
        source_url = _zoho_url("Deals", record_id)
        metadata.update(
            amount=record.get("Amount") or None,
            stage=_zoho_value(record.get("Stage")),
            closingDate=record.get("Closing_Date") or None,
            account=_zoho_value(record.get("Account_Name")),
        )
    else:
        title = (
            _zoho_value(record.get("Full_Name"))
            or _zoho_value(record.get("Account_Name"))
            or _zoho_value(record.get("Subject"))
            or "Untitled"
        )

    return _normalized(
        type_, title,
        description=_zoho_value(record.get("Description")),
        source_url=source_url,
        metadata=metadata,
    )


def slack(record: dict) -> dict:
    profile = record.get("profile") or {}
    return _normalized(
        "contact",
        profile.get("display_name") or record.get("name") or "Unnamed User",
        description=profile.get("real_name") or None,
        metadata={
            "email": profile.get("email") or None,
            "avatar": profile.get("image_original") or None,
            "isBot": record.get("is_bot") or False,
            "teamId": record.get("team_id") or None,
        },
    )


def google_calendar(record: dict) -> dict:
    return _normalized(
        "event",
        record.get("summary") or "Untitled Event",
        description=record.get("description") or None,
        source_url=record.get("htmlLink") or None,
        metadata={
            "start": record.get("start") or None,
            "end": record.get("end") or None,
            "location": record.get("location") or None,
            "attendees": record.get("attendees") or [],
        },
    )


def jira(record: dict) -> dict:
    comments = record.get("comments")
    return _normalized(
        "issue",
        record.get("summary") or "Untitled",
        description=record.get("description") or None,
        source_url=_first(record, "webUrl", "url"),
        metadata={
            "key": record.get("key") or None,
            "issueType": record.get("issueType") or None,
            "status": record.get("status") or None,
            "assignee": record.get("assignee") or None,
            "projectKey": record.get("projectKey") or None,
            "projectName": record.get("projectName") or None,
            "commentsCount": len(comments) if isinstance(comments, list) else 0,
        },
    )


MAPPERS = {
    "google-drive": google_drive,
    "salesforce": salesforce,
    "github": github,
    "github-getting-started": github,
    "zoho-crm": zoho,
    "slack": slack,
    "google-calendar": google_calendar,
    "google-calendar-getting-started": google_calendar,
    "jira": jira,
}
