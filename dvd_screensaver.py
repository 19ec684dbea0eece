# dvd_screensaver.py
import os
import sys
import argparse
import base64
import binascii
import io
import math
import random
import time
from dataclasses import dataclass, field, replace
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame

import dvd_logo

# =============================================================================
# BUILD FLAGS
# =============================================================================
BUILD_DEBUG = False  # set True before compiling your debug build

# =============================================================================
# OPTIONAL DEPENDENCIES (debug HUD)
# =============================================================================
try:
    import psutil
    HAS_PSUTIL = True
except Exception:
    HAS_PSUTIL = False

try:
    import pynvml
    HAS_NVML = True
except Exception:
    HAS_NVML = False

# =============================================================================
# Prevent display sleep while running (Windows)
# =============================================================================
if os.name == "nt":
    import ctypes
    ES_CONTINUOUS       = 0x80000000
    ES_SYSTEM_REQUIRED  = 0x00000001
    ES_DISPLAY_REQUIRED = 0x00000002

    def keep_display_awake():
        ctypes.windll.kernel32.SetThreadExecutionState(
            ES_CONTINUOUS | ES_SYSTEM_REQUIRED | ES_DISPLAY_REQUIRED
        )
else:
    def keep_display_awake():
        pass

# =============================================================================
# Logging (important for --noconsole builds)
# =============================================================================
LOG_ENABLED = os.name == "nt"
LOG_NAME = "dvd_screensaver.log"

def log_to_temp(msg: str):
    if not LOG_ENABLED:
        return
    try:
        p = os.path.join(os.environ.get("TEMP", "."), LOG_NAME)
        with open(p, "a", encoding="utf-8") as f:
            f.write(time.strftime("%Y-%m-%d %H:%M:%S ") + msg.rstrip() + "\n")
    except OSError:
        pass

# =============================================================================
# CONFIG
# =============================================================================
FPS_MAX = 60
COLOR_BG = (0, 0, 0)
WINDOWED_SIZE = (1280, 720)

INITIAL_VELOCITY = (300.0, 300.0)  # px/s
MAX_STEP = 10.0                    # px per frame, per axis
LOGO_FRACTION = 7                  # logo fits in 1/7 of the window
HUE_RANGE = (120, 240)             # degrees, upper bound exclusive
GRACE_PERIOD = 0.1                 # seconds of ignored input after launch

STUB_MESSAGE = "Configuration menu and in-window preview are not implemented"

class AssetError(RuntimeError):
    pass

def clamp(x, lo, hi):
    return lo if x < lo else hi if x > hi else x

# =============================================================================
# Geometry (window-centered, y up)
# =============================================================================
@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_size(cls, w, h):
        return cls(0.0, 0.0, float(w), float(h))

    @property
    def left(self) -> float:
        return self.x - self.w / 2.0

    @property
    def right(self) -> float:
        return self.x + self.w / 2.0

    @property
    def bottom(self) -> float:
        return self.y - self.h / 2.0

    @property
    def top(self) -> float:
        return self.y + self.h / 2.0

    def shift_x(self, dx):
        return replace(self, x=self.x + dx)

    def shift_y(self, dy):
        return replace(self, y=self.y + dy)

    # Snapping sets the center from the bound so the edge lands exactly on it.
    def align_left(self, bound):
        return replace(self, x=bound + self.w / 2.0)

    def align_right(self, bound):
        return replace(self, x=bound - self.w / 2.0)

    def align_bottom(self, bound):
        return replace(self, y=bound + self.h / 2.0)

    def align_top(self, bound):
        return replace(self, y=bound - self.h / 2.0)

# =============================================================================
# Session state
# =============================================================================
@dataclass
class Session:
    image: pygame.Surface
    rect: Rect
    velocity: list = field(default_factory=lambda: list(INITIAL_VELOCITY))
    first_pointer_pos: Optional[tuple] = None
    started_at: float = field(default_factory=time.perf_counter)
    bounces: int = 0

    def elapsed(self, now=None) -> float:
        if now is None:
            now = time.perf_counter()
        return now - self.started_at

# =============================================================================
# Logo asset + recolor
# =============================================================================
def load_logo(b64=None):
    """
    Decode the PNG bundled in dvd_logo.py. The asset ships with the code,
    so any failure here is fatal.
    """
    if b64 is None:
        b64 = dvd_logo.LOGO_PNG_B64
    try:
        data = base64.b64decode(b64, validate=True)
        return pygame.image.load(io.BytesIO(data), "dvd_logo.png")
    except (binascii.Error, ValueError, pygame.error) as e:
        raise AssetError(f"bundled logo could not be decoded: {e}") from e

def thumbnail_size(size, bounds):
    w, h = size
    max_w, max_h = bounds
    if w <= max_w and h <= max_h:
        return int(w), int(h)
    ratio = min(max_w / w, max_h / h)
    return max(1, int(round(w * ratio))), max(1, int(round(h * ratio)))

def hue_rotate(surface, degrees):
    """
    Rotate hue with the luminance-preserving matrix (same one CSS hue-rotate()
    uses). Returns a new surface; alpha is untouched.
    """
    a = math.radians(degrees)
    c, s = math.cos(a), math.sin(a)
    m = np.array([
        [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
        [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
        [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
    ], dtype=np.float32)

    out = surface.copy()
    rgb = pygame.surfarray.pixels3d(out)
    rotated = rgb.astype(np.float32) @ m.T
    np.clip(rotated, 0.0, 255.0, out=rotated)
    rgb[...] = rotated.astype(np.uint8)  # truncates
    del rgb  # unlock
    return out

def change_color(surface, rng=None):
    rng = rng or random
    return hue_rotate(surface, rng.randrange(*HUE_RANGE))

def new_session(window_size, logo=None, rng=None) -> Session:
    if logo is None:
        logo = load_logo()
    w, h = window_size
    bounds = (w // LOGO_FRACTION, h // LOGO_FRACTION)
    size = thumbnail_size(logo.get_size(), bounds)
    if size != logo.get_size():
        logo = pygame.transform.smoothscale(logo, size)
    image = change_color(logo, rng)
    iw, ih = image.get_size()
    return Session(image=image, rect=Rect(0.0, 0.0, float(iw), float(ih)))

# =============================================================================
# Frame events + input watchdog
# =============================================================================
@dataclass(frozen=True)
class PointerMoved:
    pos: tuple

@dataclass(frozen=True)
class ButtonPressed:
    pass

@dataclass(frozen=True)
class KeyPressed:
    pass

@dataclass(frozen=True)
class WheelScrolled:
    pass

def translate_event(event):
    if event.type == pygame.MOUSEMOTION:
        return PointerMoved(tuple(event.pos))
    if event.type == pygame.MOUSEBUTTONDOWN:
        return ButtonPressed()
    if event.type == pygame.KEYDOWN:
        return KeyPressed()
    if event.type == pygame.MOUSEWHEEL:
        return WheelScrolled()
    return None

def watchdog(session: Session, event, elapsed: float) -> bool:
    """True if this event should end the screensaver."""
    # window managers emit synthetic motion right after the window maps
    if elapsed <= GRACE_PERIOD:
        return False

    if isinstance(event, PointerMoved):
        if session.first_pointer_pos is None:
            session.first_pointer_pos = event.pos
        return session.first_pointer_pos != event.pos

    return isinstance(event, (ButtonPressed, KeyPressed, WheelScrolled))

# =============================================================================
# Physics
# =============================================================================
def physics_step(session: Session, dt: float, window: Rect, recolor=change_color, rng=None) -> int:
    vel = session.velocity

    # cap per-frame movement so a stalled frame can't tunnel through a wall
    step_x = clamp(vel[0] * dt, -MAX_STEP, MAX_STEP)
    step_y = clamp(vel[1] * dt, -MAX_STEP, MAX_STEP)
    rect = session.rect.shift_x(step_x).shift_y(step_y)

    hits = 0
    if rect.left <= window.left:
        vel[0] = abs(vel[0])
        rect = rect.align_left(window.left)
        session.image = recolor(session.image, rng)
        hits += 1
    elif rect.right >= window.right:
        vel[0] = -abs(vel[0])
        rect = rect.align_right(window.right)
        session.image = recolor(session.image, rng)
        hits += 1

    if rect.bottom <= window.bottom:
        vel[1] = abs(vel[1])
        rect = rect.align_bottom(window.bottom)
        session.image = recolor(session.image, rng)
        hits += 1
    elif rect.top >= window.top:
        vel[1] = -abs(vel[1])
        rect = rect.align_top(window.top)
        session.image = recolor(session.image, rng)
        hits += 1

    session.rect = rect
    session.bounces += hits
    return hits

# =============================================================================
# Debug HUD (optional)
# =============================================================================
class SystemStats:
    def __init__(self):
        self.have_psutil = HAS_PSUTIL
        self.have_nvml = False
        self.nvml_handle = None
        self.last_poll = 0.0
        self.cpu = 0.0
        self.mem = 0.0
        self.gpu = None

        if HAS_NVML:
            try:
                pynvml.nvmlInit()
                self.nvml_handle = pynvml.nvmlDeviceGetHandleByIndex(0)
                self.have_nvml = True
            except Exception:
                self.have_nvml = False

        if self.have_psutil:
            psutil.cpu_percent(interval=None)  # prime; first reading is always 0

    def poll(self, now):
        if now - self.last_poll < 1.0:
            return
        self.last_poll = now

        if self.have_psutil:
            try:
                self.cpu = float(psutil.cpu_percent(interval=None))
                self.mem = float(psutil.virtual_memory().percent)
            except (psutil.Error, OSError):
                self.cpu = 0.0
                self.mem = 0.0

        if self.have_nvml:
            try:
                self.gpu = float(pynvml.nvmlDeviceGetUtilizationRates(self.nvml_handle).gpu)
            except pynvml.NVMLError:
                self.gpu = None

class DebugHUD:
    def __init__(self, w, font_name="Consolas", font_size=18):
        self.w = w
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = (255, 220, 0)
        self.stats = SystemStats()
        self.frames = 0
        self.last_fps_tick = time.time()
        self.frames_per_sec = 0.0

    def note_frame(self):
        self.frames += 1
        now = time.time()
        if now - self.last_fps_tick >= 1.0:
            dt = now - self.last_fps_tick
            self.frames_per_sec = self.frames / dt if dt > 0 else 0.0
            self.frames = 0
            self.last_fps_tick = now

    def lines(self, session: Session, clock=None):
        r = session.rect
        vx, vy = session.velocity
        out = ["DVD DEBUG"]
        if clock is not None:
            out.append(f"FPS(clock) : {clock.get_fps():6.1f}")
        out.append(f"Frames/s   : {self.frames_per_sec:6.1f}")
        out.append(f"Pos        : {r.x:7.1f} {r.y:7.1f}")
        out.append(f"Vel        : {vx:7.1f} {vy:7.1f}")
        out.append(f"Size       : {int(r.w)}x{int(r.h)}")
        out.append(f"Bounces    : {session.bounces}")
        if self.stats.have_psutil:
            out.append(f"CPU %      : {self.stats.cpu:6.1f}")
            out.append(f"Mem %      : {self.stats.mem:6.1f}")
        if self.stats.gpu is not None:
            out.append(f"GPU %      : {self.stats.gpu:6.1f}")
        return out

    def draw(self, screen, session: Session, clock=None):
        self.stats.poll(time.time())
        rendered = [self.font.render(s, True, self.color) for s in self.lines(session, clock)]
        max_w = max(s.get_width() for s in rendered)
        x0 = self.w - max_w - 12
        y = 8
        for surf in rendered:
            screen.blit(surf, (x0, y))
            y += surf.get_height() + 2

# =============================================================================
# Render
# =============================================================================
def to_screen(rect: Rect, window_size):
    w, h = window_size
    left = w / 2.0 + rect.left
    top = h / 2.0 - rect.top
    return pygame.Rect(int(round(left)), int(round(top)), int(rect.w), int(rect.h))

def render(screen, session: Session, hud=None, clock=None):
    dest = to_screen(session.rect, screen.get_size())
    image = session.image
    if image.get_size() != dest.size:
        image = pygame.transform.smoothscale(image, dest.size)

    screen.fill(COLOR_BG)
    screen.blit(image, dest)

    if hud is not None:
        hud.note_frame()
        hud.draw(screen, session, clock)

    pygame.display.flip()

# =============================================================================
# MAIN
# =============================================================================
def set_mode_safe(size, flags, want_vsync=True):
    try:
        return pygame.display.set_mode(size, flags, vsync=1 if want_vsync else 0)
    except (TypeError, pygame.error):
        return pygame.display.set_mode(size, flags)

def is_stub_flag(argv) -> bool:
    flag = argv[0] if argv else ""
    return flag.startswith("/c") or flag.startswith("/p")

def parse_args(argv):
    parser = argparse.ArgumentParser(prog="dvd-screensaver", prefix_chars='-/')
    parser.add_argument('/s', '/S', action='store_true', dest='windows_screensaver', help="Windows Screensaver Launch Flag")
    parser.add_argument('--windowed', action='store_true', help="Run in a resizable window instead of fullscreen")
    parser.add_argument('--debug', action='store_true', help="Enable debug HUD")
    parser.add_argument('--fps', type=int, default=FPS_MAX, help="Frame cap")
    args, _unknown = parser.parse_known_args(argv)
    if args.fps <= 0:
        args.fps = FPS_MAX
    return args

def run(args):
    debug_enabled = (BUILD_DEBUG or args.debug)

    pygame.init()
    if args.windowed:
        screen = set_mode_safe(WINDOWED_SIZE, pygame.RESIZABLE | pygame.DOUBLEBUF)
    else:
        screen = set_mode_safe((0, 0), pygame.FULLSCREEN | pygame.DOUBLEBUF)
    pygame.display.set_caption("DVD Screensaver")
    pygame.mouse.set_visible(False)

    w, h = screen.get_size()
    session = new_session((w, h), load_logo().convert_alpha())
    log_to_temp(f"[START] window={w}x{h} logo={int(session.rect.w)}x{int(session.rect.h)}")

    clock = pygame.time.Clock()
    hud = DebugHUD(w) if debug_enabled else None

    running = True
    while running:
        keep_display_awake()
        dt = clock.tick(args.fps) / 1000.0

        elapsed = session.elapsed()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            frame_event = translate_event(event)
            if frame_event is not None and watchdog(session, frame_event, elapsed):
                log_to_temp(f"[QUIT] {frame_event!r} at {elapsed:.2f}s")
                running = False
                break
        if not running:
            break

        physics_step(session, dt, Rect.from_size(*screen.get_size()))
        if hud is not None:
            hud.w = screen.get_width()
        render(screen, session, hud, clock)

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if is_stub_flag(argv):
        print(STUB_MESSAGE)
        log_to_temp(f"[STUB] {argv[0]}")
        sys.exit(0)

    args = parse_args(argv)
    try:
        run(args)
    except Exception as e:
        log_to_temp(f"[FATAL] {e!r}")
        raise
    finally:
        pygame.quit()
    sys.exit(0)

if __name__ == "__main__":
    main()
