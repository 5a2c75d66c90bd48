# main.py
import argparse
import logging

from config import AppConfig
from runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Grid snake with levels, wrap mode and obstacles.")
    p.add_argument("mode", nargs="?", default="play", choices=["play"])
    p.add_argument("--grid-w", type=int)
    p.add_argument("--grid-h", type=int)
    p.add_argument("--cell-px", type=int)
    p.add_argument("--seed", type=int)
    p.add_argument("--wrap", action="store_true", help="wrap around the edges instead of dying")
    p.add_argument("--obstacles", action="store_true", help="add obstacles on every level-up")
    p.add_argument("--highscore-file", help="where the high score is kept")
    p.add_argument("--no-save", action="store_true", help="keep the high score in memory only")
    p.add_argument("--run-log", help="append finished runs to this CSV file")
    p.add_argument("--log-level", default=None)
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {
        "grid_w": args.grid_w,
        "grid_h": args.grid_h,
        "render_cell": args.cell_px,
        "seed": args.seed,
        "highscore_path": args.highscore_file,
        "run_log_path": args.run_log,
        "log_level": args.log_level,
    }
    cfg = cfg.with_(**{k: v for k, v in overrides.items() if v is not None})
    if args.wrap:
        cfg = cfg.with_(wrap_enabled=True)
    if args.obstacles:
        cfg = cfg.with_(obstacles_enabled=True)
    if args.no_save:
        cfg = cfg.with_(highscore_path=None)
    return cfg.validate()

def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    setup_logging(cfg.log_level)
    if args.mode == "play":
        return snake(cfg)

if __name__ == "__main__":
    main()
