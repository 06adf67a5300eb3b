import re

from status_api.config import DEFAULT_MINECRAFT_PORT
from status_api.errors import InvalidInput
from status_api.models import ProbeTarget

_PORT_PATTERN = re.compile(r'\+?[0-9]+')


def _parse_port(text):
    """ポート文字列を u16 として読む。読めなければ None"""
    if text is None or not _PORT_PATTERN.fullmatch(text):
        return None
    port = int(text)
    if port > 0xFFFF:
        return None
    return port


def parse_address(address: str) -> ProbeTarget:
    """`host[:port]` を ProbeTarget に分解する

    ポートが無い・読めない・範囲外の場合は 25565 にフォールバックする。
    3つ目以降の `:` 区切りは無視する。
    """
    segments = address.split(':')
    host = segments[0]
    if not host:
        raise InvalidInput(f"empty host in address {address!r}")

    port = _parse_port(segments[1] if len(segments) > 1 else None)
    if port is None:
        port = DEFAULT_MINECRAFT_PORT
    return ProbeTarget(host, port)
