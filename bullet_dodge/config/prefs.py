"""
鍵值持久化存儲
"""

import json
import logging
from pathlib import Path
from typing import Dict

from ..core.interfaces import PrefsStore

logger = logging.getLogger(__name__)


class MemoryPrefs(PrefsStore):
    """記憶體存儲（測試或不保存時使用）"""

    def __init__(self, values: Dict[str, str] = None):
        self.values: Dict[str, str] = dict(values or {})
        self.save_count = 0

    def get_string(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    def set_string(self, key: str, value: str):
        self.values[key] = str(value)

    def save(self):
        self.save_count += 1


class JsonPrefs(MemoryPrefs):
    """保存到 JSON 文件的存儲"""

    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self):
        if not self.path.exists():
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"無法讀取存檔 {self.path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"存檔格式錯誤，已忽略: {self.path}")
            return

        self.values = {str(k): str(v) for k, v in data.items()}

    def save(self):
        """寫入文件"""
        super().save()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.values, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning(f"無法寫入存檔 {self.path}: {e}")
