"""
Pure game logic for LANEDODGE — no pygame dependency.
Used by the pygame host, the headless simulator, and the tests.
"""

import random
from collections import deque
from enum import Enum

# ─────────────────────────────────────────
# Constants
# ─────────────────────────────────────────
WIDTH, HEIGHT = 800, 600

LANE_COUNT = 3
HOME_LANE = 1

CAR_W, CAR_H = 50, 100
PLAYER_OFFSET_Y = 120     # player sits this far above the bottom edge

START_SPEED = 2.0
SPEED_STEP = 0.1          # added on every spawn
SPAWN_Y = -100.0
SPAWN_MIN, SPAWN_MAX = 100, 150
TICK_WRAP = 5000


class CollaboratorUnavailableError(RuntimeError):
    """Raised when a game instance cannot start without its renderer or track."""


class VehicleKind(Enum):
    PLAYER = "player"
    OBSTACLE = "obstacle"


class Phase(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    CONFIRM = "confirm"


def random_color(rng=None):
    rng = rng or random
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


# ─────────────────────────────────────────
# Track + vehicles
# ─────────────────────────────────────────

class Track:
    def __init__(self, width=WIDTH, height=HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Track dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    @classmethod
    def from_surface(cls, surface):
        """Read the track size back from a provisioned surface."""
        width, height = surface.get_size()
        return cls(width, height)

    def lane_center(self, lane):
        return lane * self.width / LANE_COUNT + self.width / (2 * LANE_COUNT)

    def divider_xs(self):
        return [self.width * i / LANE_COUNT for i in range(1, LANE_COUNT)]


def clamp_lane(lane):
    return max(0, min(LANE_COUNT - 1, int(lane)))


class Vehicle:
    def __init__(self, x=0.0, y=0.0, width=CAR_W, height=CAR_H, color=None,
                 kind=VehicleKind.OBSTACLE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Vehicle dimensions must be positive, got {width}x{height}")
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.color = color if color is not None else random_color()
        self.kind = kind
        self.lane = None

    @property
    def is_player(self):
        return self.kind is VehicleKind.PLAYER

    def set_lane(self, lane, track):
        """Clamp `lane` into range, then center the vehicle in it."""
        self.lane = clamp_lane(lane)
        self.x = track.lane_center(self.lane) - self.width / 2

    def move(self, d, track):
        """Shift lanes. d=-1 for left, d=1 for right."""
        current = self.lane if self.lane is not None else HOME_LANE
        self.set_lane(current + d, track)

    def advance(self, speed):
        if self.is_player:
            return
        self.y += speed

    def rect(self):
        """Return (x, y, w, h) tuple for collision detection and drawing."""
        return (self.x, self.y, self.width, self.height)

    def __repr__(self):
        return (f"Vehicle({self.kind.value}, lane={self.lane}, "
                f"x={self.x:.2f}, y={self.y:.2f})")


def make_player(track, color=(0, 215, 255)):
    player = Vehicle(y=track.height - PLAYER_OFFSET_Y, color=color, kind=VehicleKind.PLAYER)
    player.set_lane(HOME_LANE, track)
    return player


def make_obstacle(lane, track, color=None):
    obstacle = Vehicle(y=SPAWN_Y, color=color, kind=VehicleKind.OBSTACLE)
    obstacle.set_lane(lane, track)
    return obstacle


# ─────────────────────────────────────────
# Collision
# ─────────────────────────────────────────

def collides(a, b):
    """Inclusive axis-aligned bounding-box overlap."""
    return (a.x <= b.x + b.width and a.x + a.width >= b.x
            and a.y <= b.y + b.height and a.y + a.height >= b.y)


def any_collision(player, obstacles):
    return any(collides(player, o) for o in obstacles)


# ─────────────────────────────────────────
# Spawning + scoring
# ─────────────────────────────────────────

class SpawnScheduler:
    def __init__(self, rng=None, low=SPAWN_MIN, high=SPAWN_MAX):
        if not 0 < low <= high:
            raise ValueError(f"Invalid spawn interval range [{low}, {high}]")
        self.rng = rng or random.Random()
        self.low = low
        self.high = high

    def should_spawn(self, tick):
        n = self.rng.randint(self.low, self.high)
        return tick % n == 0

    def maybe_spawn(self, tick, track):
        """Return a fresh obstacle in a random lane, or None."""
        if not self.should_spawn(tick):
            return None
        lane = self.rng.randint(0, LANE_COUNT - 1)
        return make_obstacle(lane, track, color=random_color(self.rng))


class HighScore:
    """Process-wide best score. Survives restarts, never decreases."""

    def __init__(self, value=0):
        self.value = value

    def submit(self, score):
        if score > self.value:
            self.value = score
            return True
        return False


class ScoreTracker:
    def __init__(self, high_score):
        self.high_score = high_score
        self.score = 0
        self._published = False

    def retire(self, obstacles, track):
        """Drop obstacles that left the track, counting one point each.

        Returns the surviving obstacles in their original order.
        """
        survivors = []
        for o in obstacles:
            if o.y >= track.height:
                self.score += 1
            else:
                survivors.append(o)
        return survivors

    def publish(self):
        """Push the final score to the high-score cell. Only the first call counts."""
        if self._published:
            return False
        self._published = True
        return self.high_score.submit(self.score)


# ─────────────────────────────────────────
# Session state + loop
# ─────────────────────────────────────────

class GameSession:
    """Per-instance state: tick, speed, phase, player and obstacles."""

    def __init__(self, track, high_score):
        self.track = track
        self.scores = ScoreTracker(high_score)
        self.tick = 0
        self.speed = START_SPEED
        self.phase = Phase.INITIALIZING
        self.player = make_player(track)
        self.obstacles = []

    @property
    def score(self):
        return self.scores.score

    @property
    def high_score(self):
        return self.scores.high_score.value

    def nearest_obstacles(self):
        """Return normalized distance to nearest obstacle ahead in each lane. 1.0 = clear."""
        distances = [1.0] * LANE_COUNT
        player_top = self.player.y
        for o in self.obstacles:
            # Skip obstacles already below the player
            if o.lane is None or o.y > player_top + self.player.height:
                continue
            norm_dist = max(0.0, (player_top - (o.y + o.height)) / self.track.height)
            distances[o.lane] = min(distances[o.lane], norm_dist)
        return distances

    def encode(self):
        """Encode current state as dict for replay/results."""
        return {
            "tick": self.tick,
            "lane": self.player.lane,
            "obs": [[o.lane, o.y / self.track.height] for o in self.obstacles],
            "speed": round(self.speed, 4),
            "score": self.score,
            "phase": self.phase.value,
        }


class GameLoop:
    """Drives one game instance through Initializing → Running → GameOver.

    The loop owns its tick timer. Ticks are delivered by the timer calling
    `on_tick`; commands arrive through `handle_command`. A command that shows
    up while a tick is in progress is queued and applied once it completes.
    """

    def __init__(self, track, renderer, timer, high_score, rng=None, verbose=True):
        self.track = track
        self.renderer = renderer
        self.timer = timer
        self.rng = rng or random.Random()
        self.spawner = SpawnScheduler(self.rng)
        self.session = GameSession(track, high_score) if track is not None else None
        self.verbose = verbose
        self._in_tick = False
        self._pending = deque()

    @property
    def phase(self):
        return self.session.phase if self.session is not None else Phase.INITIALIZING

    def _log(self, msg):
        if self.verbose:
            print(f"[game] {msg}", flush=True)

    def initialize(self):
        if self.renderer is None or self.track is None:
            raise CollaboratorUnavailableError("Cannot start a game without a renderer and a track")
        s = self.session
        s.tick = 0
        s.speed = START_SPEED
        s.scores.score = 0
        s.obstacles = []
        s.player = make_player(self.track)
        s.phase = Phase.RUNNING
        self._log("Game started")
        self.timer.start(self.on_tick)

    def on_tick(self):
        s = self.session
        if s.phase is not Phase.RUNNING:
            return
        self._in_tick = True
        try:
            tick = s.tick
            s.tick = (tick + 1) % TICK_WRAP

            obstacle = self.spawner.maybe_spawn(tick, self.track)
            if obstacle is not None:
                s.obstacles.append(obstacle)
                s.speed += SPEED_STEP

            for o in s.obstacles:
                o.advance(s.speed)

            self.renderer.render_frame(s.player, s.obstacles, self.track)

            if any_collision(s.player, s.obstacles):
                self._game_over()
            else:
                s.obstacles = s.scores.retire(s.obstacles, self.track)
        finally:
            self._in_tick = False
        self._drain_pending()

    def _game_over(self):
        s = self.session
        s.phase = Phase.GAME_OVER
        self.timer.stop()
        self._log(f"Game ended (score {s.score})")
        if s.scores.publish():
            self._log(f"New high score {s.high_score}")

    def handle_command(self, command):
        """Apply a lane command. Returns True when a restart was requested."""
        if self._in_tick:
            self._pending.append(command)
            return False
        return self._apply(command)

    def _apply(self, command):
        s = self.session
        if s is None:
            return False
        if s.phase is Phase.GAME_OVER:
            return command is Command.CONFIRM
        if s.phase is not Phase.RUNNING:
            return False
        if command is Command.MOVE_LEFT:
            s.player.move(-1, self.track)
        elif command is Command.MOVE_RIGHT:
            s.player.move(1, self.track)
        return False

    def _drain_pending(self):
        while self._pending:
            self._apply(self._pending.popleft())

    def teardown(self):
        self.timer.stop()
        self._pending.clear()
