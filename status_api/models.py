from dataclasses import dataclass
from typing import List, Optional

from status_api.config import DEFAULT_MINECRAFT_PORT
from status_api.errors import StatusError


@dataclass(frozen=True)
class ProbeTarget:
    host: str
    port: int = DEFAULT_MINECRAFT_PORT

    def __post_init__(self):
        if not self.host:
            raise ValueError("host must not be empty")
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    def __str__(self):
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ServerVersionInfo:
    name: str
    protocol: int

    def to_dict(self):
        return {'name': self.name, 'protocol': self.protocol}


@dataclass(frozen=True)
class PlayerSample:
    name: str
    id: str

    def to_dict(self):
        return {'name': self.name, 'id': self.id}


@dataclass(frozen=True)
class PlayerSummary:
    max: int
    online: int
    sample: Optional[List[PlayerSample]] = None

    def to_dict(self):
        # sample は空・未設定ならキーごと省く
        data = {'max': self.max, 'online': self.online}
        if self.sample:
            data['sample'] = [player.to_dict() for player in self.sample]
        return data


@dataclass(frozen=True)
class StatusRecord:
    """1回のプローブ成功で得られるサーバー状態

    description は常に正規化済みの文字列。
    """
    version: ServerVersionInfo
    players: PlayerSummary
    description: str
    favicon: Optional[str] = None

    def to_dict(self):
        data = {
            'version': self.version.to_dict(),
            'players': self.players.to_dict(),
            'description': self.description,
        }
        if self.favicon is not None:
            data['favicon'] = self.favicon
        return data


@dataclass(frozen=True)
class ProbeOutcome:
    """プローブ結果。record と error のどちらか一方だけを持つ"""
    record: Optional[StatusRecord] = None
    error: Optional[StatusError] = None

    def __post_init__(self):
        if (self.record is None) == (self.error is None):
            raise ValueError("ProbeOutcome needs exactly one of record or error")

    @classmethod
    def success(cls, record: StatusRecord) -> 'ProbeOutcome':
        return cls(record=record)

    @classmethod
    def protocol_failure(cls) -> 'ProbeOutcome':
        return cls(error=StatusError.PROTOCOL_ERROR)

    @classmethod
    def timeout(cls) -> 'ProbeOutcome':
        return cls(error=StatusError.TIMEOUT)

    @classmethod
    def invalid_input(cls) -> 'ProbeOutcome':
        return cls(error=StatusError.INVALID_INPUT)

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class ApiResponse:
    err: Optional[StatusError] = None
    result: Optional[StatusRecord] = None

    def __post_init__(self):
        if (self.err is None) == (self.result is None):
            raise ValueError("ApiResponse needs exactly one of err or result")

    @classmethod
    def from_outcome(cls, outcome: ProbeOutcome) -> 'ApiResponse':
        return cls(err=outcome.error, result=outcome.record)

    def to_dict(self):
        if self.result is not None:
            return {'result': self.result.to_dict()}
        return {'err': self.err.value}
