import argparse

from config import AppConfig
from core.interfaces import UP, DOWN, LEFT, RIGHT
from runners.run_snake import main as snake

KEYS = {"U": UP, "D": DOWN, "L": LEFT, "R": RIGHT}

def parse_script(text):
    """'U@10,L@25' -> {10: [UP], 25: [LEFT]}  (press at frame index)."""
    script = {}
    if not text:
        return script
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, frame = item.partition("@")
        if not sep or key.upper() not in KEYS:
            raise ValueError(f"bad script item {item!r}, expected e.g. 'U@10'")
        script.setdefault(int(frame), []).append(KEYS[key.upper()])
    return script

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Snake")
    p.add_argument("--cell-count", type=int, default=25)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--offset", type=int, default=75)
    p.add_argument("--tick", type=float, default=0.2, help="seconds between snake moves")
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--title", default="Snake")
    p.add_argument("--no-audio", action="store_true")
    p.add_argument("--record-dir", default=None)
    p.add_argument("--round-log", default=None, help="append finished rounds to this CSV")
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--headless", action="store_true", help="no window; simulated clock and scripted input")
    p.add_argument("--frames", type=int, default=None, help="headless: frames to run")
    p.add_argument("--script", default="", help="headless: presses like 'U@10,L@25'")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig(
        cell_count=args.cell_count,
        cell_size=args.cell_size,
        grid_offset=args.offset,
        tick_interval=args.tick,
        fps=args.fps,
        seed=args.seed,
        title=args.title,
        audio=not args.no_audio,
        record_dir=args.record_dir,
        round_log_path=args.round_log,
        verbose=args.verbose,
    ).validate()

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    return snake(cfg, headless=args.headless, max_frames=args.frames, script=parse_script(args.script))

if __name__ == "__main__":
    main()
