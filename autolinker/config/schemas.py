"""
JSON Schema for the persisted settings document.

The shape is the one written by the original plugin's data store:

    {"registrations": [{"projectKey": "ABC", "baseUrl": "https://x.atlassian.net"}]}

Per-entry value checks (key format, URL shape) are done by the pydantic
registration model; this schema only guards the document structure.
"""

SETTINGS_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "autolinker_settings_v1",
    "type": "object",
    "properties": {
        "registrations": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["projectKey", "baseUrl"],
                "properties": {
                    "projectKey": {"type": "string"},
                    "baseUrl": {"type": "string"},
                },
            },
        },
    },
}
