from enum import Enum


class StatusError(str, Enum):
    """JSONエンベロープの err フィールドに出すエラータグ"""
    PROTOCOL_ERROR = 'ProtocolError'
    INVALID_INPUT = 'InvalidInput'
    TIMEOUT = 'Timeout'


class InvalidInput(ValueError):
    """アドレス文字列からプローブ対象を作れなかった"""


class ProtocolError(Exception):
    """ステータス問い合わせの失敗（接続・デコード・プロトコル）"""
