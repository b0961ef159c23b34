"""
抽象渲染器接口
"""

from abc import ABC, abstractmethod
from typing import Dict, Tuple


class Renderer(ABC):
    """渲染器抽象基類"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = ""):
        """初始化渲染器"""
        pass

    @abstractmethod
    def draw_background(self):
        """繪製背景"""
        pass

    @abstractmethod
    def draw_player(self, x: int, y: int, radius: int, facing_left: bool,
                    hit: bool, visible: bool = True):
        """繪製玩家"""
        pass

    @abstractmethod
    def draw_projectile(self, x: int, y: int, radius: int, facing_left: bool):
        """繪製彈幕"""
        pass

    @abstractmethod
    def draw_pickup(self, x: int, y: int, radius: int):
        """繪製回復道具"""
        pass

    @abstractmethod
    def draw_effect(self, data: Dict):
        """繪製效果（半透明圓）"""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        """繪製文字"""
        pass

    @abstractmethod
    def draw_panel(self, x: int, y: int, width: int, height: int,
                   alpha: int = 180):
        """繪製面板"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def handle_events(self) -> Dict:
        """處理事件"""
        pass

    @abstractmethod
    def tick(self, fps: float) -> float:
        """控制幀率，返回經過秒數"""
        pass
