"""
常量定義
"""

# 世界尺寸（世界單位）
CAMERA_HALF_HEIGHT = 5.0
PLAYER_RADIUS = 0.35
PROJECTILE_RADIUS = 0.18
PICKUP_RADIUS = 0.3
PROJECTILE_LIFETIME = 5.0
PICKUP_MIN_LIFETIME = 0.5

# 視窗
DEFAULT_WINDOW_WIDTH = 960
DEFAULT_WINDOW_HEIGHT = 540
WINDOW_TITLE = "Bullet Dodge"

# 字體
FONT_FAMILY_PRIMARY = "Arial"
FONT_SIZE_SMALL = 18
FONT_SIZE_MEDIUM = 24
FONT_SIZE_LARGE = 40

# 主題顏色
THEME_COLORS = {
    'background': (15, 15, 25),
    'grid': (30, 30, 45),
    'text_primary': (255, 255, 255),
    'text_secondary': (180, 180, 200),
    'text_warning': (255, 200, 100),
    'player': (100, 200, 255),
    'player_hit': (255, 90, 90),
    'projectile': (255, 220, 120),
    'pickup': (255, 102, 153),
}

GRID_SPACING = 40

# HUD
LIFE_ICON = "♥"
LIFE_ICON_MAX = 10
HUD_PANEL_HEIGHT = 64
PAUSE_HINT_OFFSET = 40

# 受擊閃爍頻率（次/秒）
HIT_BLINK_RATE = 12.0

# 效果
COLLISION_EFFECT_RADIUS_INIT = 6.0
COLLISION_EFFECT_RADIUS_GROW = 90.0
COLLISION_EFFECT_ALPHA_DECAY = 420.0
COLLISION_EFFECT_COLOR = (255, 120, 120)
PICKUP_EFFECT_COLOR = (255, 150, 200)
PICKUP_PARTICLE_COUNT = 10
PICKUP_PARTICLE_SPEED = 120.0
PICKUP_PARTICLE_LIFETIME = 0.5
