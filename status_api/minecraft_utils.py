import logging
from dataclasses import dataclass, field
from typing import Any, List, Union

from mcstatus import JavaServer

from status_api.config import DEFAULT_MINECRAFT_PORT, JSON_DEADLINE
from status_api.errors import ProtocolError
from status_api.models import PlayerSample, PlayerSummary, ServerVersionInfo, StatusRecord

logger = logging.getLogger('status_api')

# ソケット側のタイムアウトは最長の締め切りより少し長くしておく
DEFAULT_TIMEOUT = JSON_DEADLINE + 1.0


@dataclass(frozen=True)
class PlainDescription:
    """MOTD が文字列そのままで届いた場合"""
    text: str

    def normalize(self) -> str:
        return self.text


@dataclass(frozen=True)
class ObjectDescription:
    """MOTD が {"text": ..., "extra": [...]} 形式で届いた場合"""
    text: str
    extra: List[Any] = field(default_factory=list)

    def normalize(self) -> str:
        return self.text + ''.join(_flatten_component(part) for part in self.extra)


Description = Union[PlainDescription, ObjectDescription]


def _flatten_component(component: Any) -> str:
    if isinstance(component, str):
        return component
    if isinstance(component, dict):
        text = component.get('text', '')
        children = component.get('extra') or []
        return str(text) + ''.join(_flatten_component(child) for child in children)
    raise ProtocolError(f"unexpected description component: {component!r}")


def parse_description(raw: Any) -> Description:
    """生の description をタグ付きの型に振り分ける"""
    if isinstance(raw, str):
        return PlainDescription(raw)
    if isinstance(raw, dict):
        if 'text' not in raw:
            raise ProtocolError(f"description object without text: {raw!r}")
        text = raw['text']
        extra = raw.get('extra') or []
        if not isinstance(text, str) or not isinstance(extra, list):
            raise ProtocolError(f"malformed description object: {raw!r}")
        return ObjectDescription(text, list(extra))
    raise ProtocolError(f"unsupported description type: {type(raw).__name__}")


def to_status_record(status) -> StatusRecord:
    """mcstatus のレスポンスを StatusRecord に変換する"""
    sample = None
    if status.players.sample is not None:
        sample = [PlayerSample(name=player.name, id=player.id) for player in status.players.sample]

    return StatusRecord(
        version=ServerVersionInfo(name=status.version.name, protocol=status.version.protocol),
        players=PlayerSummary(max=status.players.max, online=status.players.online, sample=sample),
        description=parse_description(status.raw.get('description')).normalize(),
        favicon=status.icon,
    )


class MinecraftServerStatus:
    def __init__(self, timeout=DEFAULT_TIMEOUT):
        self.timeout = timeout

    async def query(self, host: str, port: int = DEFAULT_MINECRAFT_PORT) -> StatusRecord:
        """新しい接続でステータスを問い合わせる

        失敗はすべて ProtocolError にまとめる。キャンセルはそのまま伝える。
        """
        logger.debug("Querying %s:%s (socket timeout %.1fs)", host, port, self.timeout)
        try:
            server = JavaServer(host, port, timeout=self.timeout)
            status = await server.async_status()
            return to_status_record(status)
        except ProtocolError:
            raise
        except Exception as e:
            raise ProtocolError(f"status query to {host}:{port} failed: {e}") from e
