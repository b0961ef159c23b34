"""
Pygame渲染器實現
"""

import logging
from typing import Dict, Tuple

import pygame

from ..config.constants import (FONT_FAMILY_PRIMARY, FONT_SIZE_LARGE, FONT_SIZE_MEDIUM,
                                FONT_SIZE_SMALL, GRID_SPACING, THEME_COLORS)
from .renderer import Renderer

logger = logging.getLogger(__name__)

MOVE_KEYS = {
    'left': (pygame.K_LEFT, pygame.K_a),
    'right': (pygame.K_RIGHT, pygame.K_d),
    'up': (pygame.K_UP, pygame.K_w),
    'down': (pygame.K_DOWN, pygame.K_s),
}


class PygameRenderer(Renderer):
    """Pygame渲染器"""

    def __init__(self):
        self.screen = None
        self.clock = None
        self.fonts = {}
        self.width = 0
        self.height = 0
        self.grid_surface = None

    def init(self, width: int, height: int, title: str = ""):
        """初始化Pygame"""
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

        self._init_fonts()
        self.grid_surface = self._create_grid_background()

    def _init_fonts(self):
        """初始化字體，系統字體不可用時退回預設字體"""
        try:
            self.fonts['small'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_SMALL)
            self.fonts['medium'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_MEDIUM)
            self.fonts['large'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_LARGE)
        except (pygame.error, OSError) as e:
            logger.warning(f"無法載入字體 {FONT_FAMILY_PRIMARY}: {e}")
            self.fonts['small'] = pygame.font.SysFont(None, FONT_SIZE_SMALL)
            self.fonts['medium'] = pygame.font.SysFont(None, FONT_SIZE_MEDIUM)
            self.fonts['large'] = pygame.font.SysFont(None, FONT_SIZE_LARGE)

    def _create_grid_background(self) -> pygame.Surface:
        """創建網格背景"""
        surface = pygame.Surface((self.width, self.height))
        surface.fill(THEME_COLORS['background'])

        for x in range(0, self.width, GRID_SPACING):
            pygame.draw.line(surface, THEME_COLORS['grid'], (x, 0), (x, self.height), 1)
        for y in range(0, self.height, GRID_SPACING):
            pygame.draw.line(surface, THEME_COLORS['grid'], (0, y), (self.width, y), 1)

        return surface

    def draw_background(self):
        """繪製背景"""
        if self.grid_surface:
            self.screen.blit(self.grid_surface, (0, 0))
        else:
            self.screen.fill(THEME_COLORS['background'])

    def draw_player(self, x: int, y: int, radius: int, facing_left: bool,
                    hit: bool, visible: bool = True):
        """繪製玩家，受擊時變色，無敵時由呼叫方控制閃爍"""
        if not visible:
            return

        color = THEME_COLORS['player_hit'] if hit else THEME_COLORS['player']
        pygame.draw.circle(self.screen, color, (x, y), radius)
        pygame.draw.circle(self.screen, (255, 255, 255), (x, y), radius, 2)

        # 眼睛標示朝向
        eye_dx = -radius // 3 if facing_left else radius // 3
        pygame.draw.circle(self.screen, (20, 20, 30), (x + eye_dx, y - radius // 4),
                           max(2, radius // 6))

    def draw_projectile(self, x: int, y: int, radius: int, facing_left: bool):
        """繪製彈幕（帶尾焰）"""
        color = THEME_COLORS['projectile']
        tail = radius * 2 if facing_left else -radius * 2
        pygame.draw.line(self.screen, tuple(c // 2 for c in color), (x, y), (x + tail, y), max(1, radius))
        pygame.draw.circle(self.screen, color, (x, y), radius)

    def draw_pickup(self, x: int, y: int, radius: int):
        """繪製愛心"""
        color = THEME_COLORS['pickup']
        r = max(2, radius // 2)
        pygame.draw.circle(self.screen, color, (x - r, y - r // 2), r)
        pygame.draw.circle(self.screen, color, (x + r, y - r // 2), r)
        pygame.draw.polygon(self.screen, color, [
            (x - 2 * r, y - r // 3),
            (x + 2 * r, y - r // 3),
            (x, y + 2 * r),
        ])

    def draw_effect(self, data: Dict):
        """繪製半透明效果"""
        radius = int(data['radius'])
        if data['alpha'] <= 0 or radius <= 0:
            return

        surface = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(surface, (*data['color'], data['alpha']), (radius, radius), radius)
        self.screen.blit(surface, (int(data['x']) - radius, int(data['y']) - radius))

    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        """繪製文字"""
        if color is None:
            color = THEME_COLORS['text_primary']

        font = self.fonts.get(size, self.fonts['medium'])
        surface = font.render(text, True, color)

        if center:
            rect = surface.get_rect(center=(x, y))
            self.screen.blit(surface, rect)
        else:
            self.screen.blit(surface, (x, y))

    def draw_panel(self, x: int, y: int, width: int, height: int,
                   alpha: int = 180):
        """繪製半透明面板"""
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, alpha))
        self.screen.blit(panel, (x, y))

    def present(self):
        """呈現畫面"""
        pygame.display.flip()

    def cleanup(self):
        """清理資源"""
        pygame.quit()

    def handle_events(self) -> Dict:
        """處理事件與移動輸入"""
        events = {
            'quit': False,
            'restart': False,
            'pause': False,
            'axis': (0.0, 0.0),
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    events['quit'] = True
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    events['restart'] = True
                elif event.key in (pygame.K_SPACE, pygame.K_p):
                    events['pause'] = True

        pressed = pygame.key.get_pressed()

        def held(name: str) -> bool:
            return any(pressed[key] for key in MOVE_KEYS[name])

        axis_x = float(held('right')) - float(held('left'))
        axis_y = float(held('up')) - float(held('down'))
        events['axis'] = (axis_x, axis_y)
        return events

    def tick(self, fps: float) -> float:
        """控制幀率，返回經過秒數"""
        if self.clock:
            return self.clock.tick(fps) / 1000.0
        return 0.0
