import os
from dotenv import load_dotenv

load_dotenv()

def get_env_or_default(key: str, default: str) -> str:
    """環境変数を取得し、存在しない場合はデフォルト値を返す"""
    value = os.getenv(key)
    if value is None:
        return default
    return value

# バインド先
HOST = get_env_or_default('STATUS_API_HOST', '0.0.0.0')
PORT = int(get_env_or_default('STATUS_API_PORT', '8000'))

# ログ
LOG_LEVEL = get_env_or_default('LOG_LEVEL', 'INFO').upper()
LOG_FILE = get_env_or_default('LOG_FILE', 'status_api.log')

# 固定値（設定不可）
DEFAULT_MINECRAFT_PORT = 25565
TEXT_DEADLINE = 2.0
JSON_DEADLINE = 5.0
