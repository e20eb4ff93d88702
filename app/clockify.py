import requests

import config


def _headers():
    return {"X-Api-Key": config.CLOCKIFY_API_KEY}


def get_time_entries(start_iso: str, end_iso: str) -> list[dict] | dict:
    """Fetch the configured user's time entries between two UTC ISO 8601 instants.

    Returns the decoded JSON body untouched: a list of entries on success, or
    whatever error object Clockify answered with.
    """
    url = f"{config.CLOCKIFY_BASE_URL}/workspaces/{config.WORKSPACE_ID}/user/{config.USER_ID}/time-entries"
    params = {"start": start_iso, "end": end_iso}
    resp = requests.get(url, headers=_headers(), params=params, timeout=30)
    # Error statuses still carry a JSON body; let the caller decide what it means
    return resp.json()
