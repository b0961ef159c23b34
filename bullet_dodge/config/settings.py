"""
配置管理系統
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from ..core.difficulty import DifficultyCurve
from ..core.session import DEFAULT_ENCOURAGEMENTS, SessionConfig
from .constants import CAMERA_HALF_HEIGHT, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH

logger = logging.getLogger(__name__)

# 可保存的配置項
SETTING_KEYS = (
    'starting_lives', 'invincibility_duration',
    'encouragement_interval', 'encouragement_duration', 'encouragement_messages',
    'base_spawn_interval', 'min_spawn_interval', 'spawn_acceleration', 'spawn_offset',
    'base_bullet_speed', 'speed_acceleration',
    'heart_spawn_interval', 'heart_lifetime',
    'player_move_speed', 'leaderboard_capacity', 'prefs_path',
    'window_width', 'window_height', 'camera_half_height',
    'render_fps', 'enable_render', 'enable_effects', 'seed',
)


class Settings:
    """配置管理類"""

    def __init__(self):
        # 玩家
        self.starting_lives = 1
        self.invincibility_duration = 1.5
        self.player_move_speed = 5.0

        # 鼓勵訊息
        self.encouragement_interval = 10.0
        self.encouragement_duration = 2.5
        self.encouragement_messages = list(DEFAULT_ENCOURAGEMENTS)

        # 彈幕
        self.base_spawn_interval = 1.0
        self.min_spawn_interval = 0.2
        self.spawn_acceleration = 0.01
        self.spawn_offset = 1.0
        self.base_bullet_speed = 5.0
        self.speed_acceleration = 0.1

        # 回復道具
        self.heart_spawn_interval = 15.0
        self.heart_lifetime = 6.0

        # 排行榜
        self.leaderboard_capacity = 5
        self.prefs_path = "bullet_dodge_prefs.json"

        # 畫面
        self.window_width = DEFAULT_WINDOW_WIDTH
        self.window_height = DEFAULT_WINDOW_HEIGHT
        self.camera_half_height = CAMERA_HALF_HEIGHT
        self.render_fps = 60
        self.enable_render = True
        self.enable_effects = True

        # 隨機種子（None 為不固定）
        self.seed = None

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        self.update(config)

    def update(self, config: Dict[str, Any]):
        """更新已知的配置項，未知項忽略"""
        for key, value in config.items():
            if key in SETTING_KEYS:
                setattr(self, key, value)
            else:
                logger.warning(f"未知的配置項: {key}")

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in SETTING_KEYS}

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def validate(self) -> bool:
        """
        驗證配置的有效性

        超出範圍的數值會被修正並記錄警告。

        Returns:
            配置是否原本就有效
        """
        valid = True

        def fix(name: str, value: Any, reason: str):
            nonlocal valid
            logger.warning(f"配置 {name}={getattr(self, name)!r} {reason}，改為 {value!r}")
            setattr(self, name, value)
            valid = False

        if self.starting_lives < 1:
            fix('starting_lives', 1, "至少為 1")

        for name in ('invincibility_duration', 'spawn_offset', 'spawn_acceleration',
                     'speed_acceleration', 'encouragement_duration'):
            if getattr(self, name) < 0:
                fix(name, 0.0, "不可為負")

        for name in ('min_spawn_interval', 'heart_spawn_interval',
                     'encouragement_interval', 'camera_half_height', 'heart_lifetime'):
            if getattr(self, name) <= 0:
                fix(name, getattr(Settings(), name), "必須為正數")

        if self.base_spawn_interval < self.min_spawn_interval:
            fix('base_spawn_interval', self.min_spawn_interval, "不可小於最小間隔")

        if not self.encouragement_messages:
            fix('encouragement_messages', list(DEFAULT_ENCOURAGEMENTS), "不可為空")

        if self.leaderboard_capacity < 1:
            fix('leaderboard_capacity', 5, "至少為 1")

        return valid

    def session_config(self) -> SessionConfig:
        """會話參數"""
        return SessionConfig(
            starting_lives=int(self.starting_lives),
            invincibility_duration=float(self.invincibility_duration),
            encouragement_interval=float(self.encouragement_interval),
            encouragement_duration=float(self.encouragement_duration),
            encouragement_messages=tuple(self.encouragement_messages),
        )

    def difficulty_curve(self) -> DifficultyCurve:
        """難度曲線"""
        return DifficultyCurve(
            base_interval=float(self.base_spawn_interval),
            min_interval=float(self.min_spawn_interval),
            decay_rate=float(self.spawn_acceleration),
            base_speed=float(self.base_bullet_speed),
            accel_rate=float(self.speed_acceleration),
        )


def load_settings(config_path: str = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)
    elif config_path:
        logger.warning(f"配置文件不存在，使用預設值: {config_path}")

    settings.validate()
    return settings
