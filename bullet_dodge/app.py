"""
Bullet Dodge 主程式
"""

import argparse
import logging
import random
from typing import Any, Optional

from . import hud
from .config import JsonPrefs, MemoryPrefs, Settings, constants, load_settings
from .core import PickupSpawner, Scoreboard, SessionController, ThreatSpawner
from .log import setup_logging
from .rendering import EffectManager, Renderer
from .world import CameraViewport, Player, StepResult, World

logger = logging.getLogger(__name__)

# 單幀最大時間，避免視窗拖動後的大幅跳躍
MAX_FRAME_TIME = 0.1


class DodgeGame:
    """主遊戲應用"""

    def __init__(self, settings: Settings, renderer: Optional[Renderer] = None):
        """
        組裝遊戲

        Args:
            settings: 遊戲配置
            renderer: 渲染器，None 時依 enable_render 建立 PygameRenderer
        """
        self.settings = settings
        self.rng = random.Random(settings.seed)
        self.renderer = renderer

        self.viewport = CameraViewport.for_window(
            settings.window_width, settings.window_height, settings.camera_half_height
        )
        player = Player(
            move_speed=settings.player_move_speed,
            bounds=(self.viewport.half_width, self.viewport.half_height),
        )
        self.world = World(self.viewport, player)

        self.threat_spawner = ThreatSpawner(
            settings.difficulty_curve(), self.world, self.viewport,
            spawn_offset=settings.spawn_offset, rng=self.rng,
        )
        self.pickup_spawner = PickupSpawner(
            self.world, self.viewport,
            interval=settings.heart_spawn_interval,
            lifetime=settings.heart_lifetime,
            rng=self.rng,
        )

        prefs = JsonPrefs(settings.prefs_path) if settings.prefs_path else MemoryPrefs()
        self.session = SessionController(
            settings.session_config(),
            scoreboard=Scoreboard(settings.leaderboard_capacity),
            prefs=prefs,
            player=self.world.player,
            spawners=[self.threat_spawner, self.pickup_spawner],
            rng=self.rng,
        )
        self.world.bind(self.session)
        self.session.add_listener(self._on_session_event)

        self.effect_manager = EffectManager(self.rng)
        self.blink_clock = 0.0

    def initialize(self):
        """初始化渲染器"""
        if self.renderer is None and self.settings.enable_render:
            from .rendering.pygame_renderer import PygameRenderer
            self.renderer = PygameRenderer()

        if self.renderer is not None:
            self.renderer.init(self.settings.window_width, self.settings.window_height,
                               constants.WINDOW_TITLE)

    # ---------- 模擬 ----------

    def step(self, delta_time: float, move_axis=(0.0, 0.0)) -> StepResult:
        """
        推進一幀

        物理（移動與碰撞）先於會話更新，
        因此同一幀內死亡時生成器不會再被評估。
        """
        sim_dt = min(delta_time, MAX_FRAME_TIME) * self.session.time_scale
        result = self.world.step(sim_dt, move_axis)
        self.session.tick(sim_dt)

        if self.settings.enable_effects:
            self._spawn_effects(result)
            self.effect_manager.update(sim_dt)
        self.blink_clock += sim_dt
        return result

    def restart(self):
        """重新開始"""
        self.world.clear()
        self.effect_manager.clear()
        self.blink_clock = 0.0
        self.session.start()

    def _spawn_effects(self, result: StepResult):
        height = self.settings.window_height
        width = self.settings.window_width
        for position in result.hits:
            x, y = self.viewport.to_screen(position, width, height)
            self.effect_manager.add_collision(x, y)
        for position in result.collected:
            x, y = self.viewport.to_screen(position, width, height)
            self.effect_manager.add_burst(x, y)

    def _on_session_event(self, event: str, payload: Any):
        if event == "game_over":
            best = self.session.top_scores[0]
            print(f"[信息] 遊戲結束，生存時間 {payload:.1f} 秒，最佳紀錄 {best:.1f} 秒")
        elif event == "damaged":
            logger.info(f"受到傷害，剩餘生命 {payload}")
        elif event == "life_added":
            logger.info(f"回復生命，目前生命 {payload}")

    # ---------- 主迴圈 ----------

    def run(self):
        """運行遊戲直到關閉視窗"""
        if self.renderer is None:
            raise RuntimeError("渲染器未初始化，請先呼叫 initialize()")

        try:
            while True:
                events = self.renderer.handle_events()
                if events['quit']:
                    break

                if events['restart'] and not self.session.is_running():
                    self.restart()
                    print("[信息] 重新開始")
                elif events['pause'] and self.session.is_running():
                    paused = self.session.toggle_pause()
                    print("[信息] 遊戲" + ("暫停" if paused else "繼續"))

                delta_time = self.renderer.tick(self.settings.render_fps)
                self.step(delta_time, events['axis'])
                self._render_frame()
        finally:
            self.cleanup()

    def _render_frame(self):
        """渲染一幀"""
        renderer = self.renderer
        width = self.settings.window_width
        height = self.settings.window_height
        scale = self.viewport.pixels_per_unit(height)

        renderer.draw_background()

        for pickup in self.world.pickups:
            x, y = self.viewport.to_screen(pickup.position, width, height)
            renderer.draw_pickup(x, y, int(pickup.radius * scale))

        for projectile in self.world.projectiles:
            x, y = self.viewport.to_screen(projectile.position, width, height)
            renderer.draw_projectile(x, y, int(projectile.radius * scale), projectile.facing_left)

        player = self.world.player
        x, y = self.viewport.to_screen(player.position, width, height)
        visible = True
        if self.session.is_invincible:
            visible = int(self.blink_clock * constants.HIT_BLINK_RATE) % 2 == 0
        renderer.draw_player(x, y, int(player.radius * scale), player.facing_left,
                             player.is_animating("isHit"), visible)

        for data in self.effect_manager.render_data():
            renderer.draw_effect(data)

        self._render_ui()
        renderer.present()

    def _render_ui(self):
        """渲染UI元素"""
        renderer = self.renderer
        width = self.settings.window_width
        height = self.settings.window_height
        summary = self.session.summary()
        colors = constants.THEME_COLORS

        renderer.draw_panel(0, 0, width, constants.HUD_PANEL_HEIGHT)
        renderer.draw_text(hud.format_lives(summary.life_count), 12, 8, size='medium',
                           color=colors['pickup'])
        renderer.draw_text(hud.format_time(summary.elapsed_time), 12, 36, size='small',
                           color=colors['text_secondary'])

        if summary.encouragement_message:
            renderer.draw_text(summary.encouragement_message, width // 2,
                               constants.HUD_PANEL_HEIGHT + 30, size='large',
                               color=colors['text_warning'], center=True)

        if self.session.is_paused:
            renderer.draw_text("PAUSED", width // 2, height // 2, size='large',
                               color=colors['text_warning'], center=True)
            renderer.draw_text("Press SPACE to continue", width // 2,
                               height // 2 + constants.PAUSE_HINT_OFFSET,
                               size='small', center=True)

        if not summary.is_running:
            self._render_game_over(summary)

    def _render_game_over(self, summary):
        renderer = self.renderer
        width = self.settings.window_width
        height = self.settings.window_height
        colors = constants.THEME_COLORS

        renderer.draw_panel(0, 0, width, height, alpha=150)
        renderer.draw_text("GAME OVER", width // 2, height // 2 - 90, size='large',
                           color=colors['text_warning'], center=True)
        renderer.draw_text(hud.format_game_over(summary.last_game_over_score),
                           width // 2, height // 2 - 45, size='medium', center=True)

        capacity = self.session.scoreboard.capacity
        lines = hud.format_ranking(self.session.scoreboard.format_rows(), capacity)
        for i, line in enumerate(lines):
            renderer.draw_text(line, width // 2, height // 2 + i * 24, size='small',
                               color=colors['text_secondary'], center=True)

        renderer.draw_text("Press ENTER to restart", width // 2,
                           height // 2 + (len(lines) + 1) * 24, size='small', center=True)

    def cleanup(self):
        """清理資源"""
        if self.renderer:
            self.renderer.cleanup()
        print("[信息] 程序正常結束。")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bullet Dodge")
    parser.add_argument("--config", default=None, help="YAML/JSON 配置文件")
    parser.add_argument("--seed", type=int, default=None, help="隨機種子")
    parser.add_argument("--log-level", default="INFO", help="日誌等級")
    return parser


def main(argv=None):
    """主函數"""
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO))

    settings = load_settings(args.config)
    if args.seed is not None:
        settings.seed = args.seed

    game = DodgeGame(settings)
    game.initialize()
    game.run()


if __name__ == "__main__":
    main()
