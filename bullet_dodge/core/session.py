"""
會話控制器：遊戲狀態的唯一權威
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .interfaces import ActorView, PrefsStore
from .scoreboard import Scoreboard
from .spawner import Spawner

logger = logging.getLogger(__name__)

HIT_ANIMATION = "isHit"

DEFAULT_ENCOURAGEMENTS = (
    "Nice! Keep it up!",
    "Stay focused!",
    "Just a little more!",
    "Don't lose the rhythm!",
)

Listener = Callable[[str, Any], None]


@dataclass
class SessionConfig:
    """會話參數"""
    starting_lives: int = 1
    invincibility_duration: float = 1.5
    encouragement_interval: float = 10.0
    encouragement_duration: float = 2.5
    encouragement_messages: Sequence[str] = DEFAULT_ENCOURAGEMENTS


@dataclass
class SessionState:
    """會話狀態"""
    clock: float = 0.0
    lives: int = 1
    is_over: bool = False
    is_invincible: bool = False
    invincible_remaining: float = 0.0
    next_encouragement_at: float = 10.0
    encouragement_remaining: float = 0.0
    encouragement_message: Optional[str] = None


@dataclass(frozen=True)
class SessionSummary:
    """供 UI 讀取的快照"""
    life_count: int
    elapsed_time: float
    is_running: bool
    is_invincible: bool
    encouragement_message: Optional[str]
    top_scores: List[Optional[float]] = field(default_factory=list)
    last_game_over_score: Optional[float] = None


class SessionController:
    """
    遊戲會話控制器

    擁有計時、生命、無敵、鼓勵訊息與全域時間倍率，
    並協調彈幕/道具生成器與排行榜。

    所有修改操作在前置條件不成立時都是空操作，不會拋出例外，
    協作者可以無條件呼叫。
    """

    def __init__(self, config: Optional[SessionConfig] = None,
                 scoreboard: Optional[Scoreboard] = None,
                 prefs: Optional[PrefsStore] = None,
                 player: Optional[ActorView] = None,
                 spawners: Iterable[Spawner] = (),
                 rng: Optional[random.Random] = None):
        """
        初始化控制器

        Args:
            config: 會話參數
            scoreboard: 排行榜（預設容量 5）
            prefs: 排行榜的持久化存儲，None 時不保存
            player: 玩家角色表現，用於受擊動畫
            spawners: 依序在每幀更新的生成器
            rng: 鼓勵訊息的隨機數生成器
        """
        self.config = config or SessionConfig()
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard()
        self.prefs = prefs
        self.player = player
        self.rng = rng or random.Random()
        self.spawners: List[Spawner] = []
        self._listeners: List[Listener] = []
        self._time_scale = 1.0
        self._last_game_over_score: Optional[float] = None

        if self.prefs is not None:
            self.scoreboard.load(self.prefs)

        for spawner in spawners:
            self.add_spawner(spawner)

        self.state = SessionState()
        self.start()

    # ---------- 協作者 ----------

    def add_spawner(self, spawner: Spawner):
        """加入生成器（依加入順序更新）"""
        spawner.bind(self)
        self.spawners.append(spawner)

    def add_listener(self, listener: Listener):
        """訂閱事件: (event_name, payload)"""
        self._listeners.append(listener)

    def _emit(self, event: str, payload: Any = None):
        for listener in list(self._listeners):
            listener(event, payload)

    # ---------- 生命週期 ----------

    def start(self):
        """重置會話，可隨時呼叫"""
        self.state = SessionState(
            lives=max(1, int(self.config.starting_lives)),
            next_encouragement_at=self.config.encouragement_interval,
        )
        self._time_scale = 1.0

        for spawner in self.spawners:
            spawner.reset()
            spawner.enabled = True

        self._set_hit_visual(False)
        logger.info(f"會話開始: 生命 {self.state.lives}")
        self._emit("started", self.state.lives)

    def tick(self, delta_time: float):
        """
        推進一幀

        順序: 計時 -> 鼓勵訊息 -> 生成器 -> 無敵倒數

        delta_time 應為已乘上 time_scale 的模擬時間，
        此處不再套用倍率（由驅動迴圈負責，見 DodgeGame.step）。
        """
        if self.state.is_over or delta_time <= 0:
            return

        self.state.clock += delta_time
        self._update_encouragement(delta_time)

        for spawner in self.spawners:
            spawner.tick(delta_time)

        self._update_invincibility(delta_time)

    # ---------- 事件 ----------

    def apply_damage(self):
        """玩家受到傷害"""
        state = self.state
        if state.is_over or state.is_invincible:
            return

        state.lives = max(0, state.lives - 1)
        self._set_hit_visual(True)
        self._emit("damaged", state.lives)

        if state.lives <= 0:
            self._handle_game_over()
        elif self.config.invincibility_duration > 0:
            state.is_invincible = True
            state.invincible_remaining = self.config.invincibility_duration
        else:
            self._set_hit_visual(False)

    def add_life(self, amount: int = 1):
        """增加生命（拾取道具等）"""
        if self.state.is_over or amount <= 0:
            return

        self.state.lives += amount
        self._emit("life_added", self.state.lives)

    def is_running(self) -> bool:
        """遊戲是否進行中"""
        return not self.state.is_over

    # ---------- 時間倍率 ----------

    @property
    def time_scale(self) -> float:
        return self._time_scale

    def set_time_scale(self, scale: float):
        """設置全域時間倍率（遊戲結束後固定為 0）"""
        if self.state.is_over:
            return
        self._time_scale = max(0.0, float(scale))

    def toggle_pause(self) -> bool:
        """切換暫停，返回是否暫停中"""
        self.set_time_scale(1.0 if self._time_scale == 0 else 0.0)
        return self._time_scale == 0

    @property
    def is_paused(self) -> bool:
        return self.is_running() and self._time_scale == 0

    # ---------- UI 讀取 ----------

    @property
    def life_count(self) -> int:
        return self.state.lives

    @property
    def elapsed_time(self) -> float:
        return self.state.clock

    @property
    def is_invincible(self) -> bool:
        return self.state.is_invincible

    @property
    def encouragement_message(self) -> Optional[str]:
        return self.state.encouragement_message

    @property
    def top_scores(self) -> List[Optional[float]]:
        return self.scoreboard.top_n()

    @property
    def last_game_over_score(self) -> Optional[float]:
        return self._last_game_over_score

    def summary(self) -> SessionSummary:
        return SessionSummary(
            life_count=self.life_count,
            elapsed_time=self.elapsed_time,
            is_running=self.is_running(),
            is_invincible=self.is_invincible,
            encouragement_message=self.encouragement_message,
            top_scores=self.top_scores,
            last_game_over_score=self._last_game_over_score,
        )

    # ---------- 內部 ----------

    def _handle_game_over(self):
        """遊戲結束：凍結世界並記錄分數"""
        state = self.state
        state.is_over = True
        state.is_invincible = False
        state.invincible_remaining = 0.0
        self._time_scale = 0.0

        for spawner in self.spawners:
            spawner.enabled = False

        score = state.clock
        self._last_game_over_score = score
        self.scoreboard.record(score)
        if self.prefs is not None:
            self.scoreboard.save(self.prefs)

        self._hide_encouragement()
        logger.info(f"遊戲結束: 生存時間 {score:.1f} 秒")
        self._emit("game_over", score)

    def _update_encouragement(self, delta_time: float):
        state = self.state
        if state.clock >= state.next_encouragement_at:
            self._show_encouragement()
            state.next_encouragement_at += self.config.encouragement_interval

        if state.encouragement_remaining > 0:
            state.encouragement_remaining -= delta_time
            if state.encouragement_remaining <= 0:
                self._hide_encouragement()

    def _show_encouragement(self):
        messages = self.config.encouragement_messages
        if not messages:
            return

        message = self.rng.choice(list(messages))
        self.state.encouragement_message = message
        self.state.encouragement_remaining = self.config.encouragement_duration
        self._emit("encouragement", message)

    def _hide_encouragement(self):
        self.state.encouragement_message = None
        self.state.encouragement_remaining = 0.0

    def _update_invincibility(self, delta_time: float):
        state = self.state
        if not state.is_invincible:
            return

        state.invincible_remaining -= delta_time
        if state.invincible_remaining <= 0:
            state.is_invincible = False
            state.invincible_remaining = 0.0
            self._set_hit_visual(False)
            self._emit("invincibility_ended", state.lives)

    def _set_hit_visual(self, value: bool):
        if self.player is not None:
            self.player.set_animation_state(HIT_ANIMATION, value)
