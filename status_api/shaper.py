import json

from status_api.models import ApiResponse, ProbeOutcome

ONLINE_TEXT = 'Online'
OFFLINE_TEXT = 'Offline'


def shape_text(outcome: ProbeOutcome):
    """(HTTPステータス, 本文) を返す。失敗の種類は出さない"""
    if outcome.ok:
        return 200, ONLINE_TEXT
    return 503, OFFLINE_TEXT


def dump_json(data) -> str:
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False)


def shape_json(outcome: ProbeOutcome):
    """(HTTPステータス, JSON本文) を返す。失敗も常に 200 で err に載せる"""
    return 200, dump_json(ApiResponse.from_outcome(outcome).to_dict())
