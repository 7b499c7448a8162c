import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_engine' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_engine.core.errors import InvalidDimension

DEFAULT_SIZE = 32
DEFAULT_INTERVAL_MS = 100

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Engine: steppable recursive backtracker maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Maze dimension (cells per side)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation step by step")
    gen_parser.add_argument("--interval", type=int, default=DEFAULT_INTERVAL_MS, help="Milliseconds between animation steps")
    gen_parser.add_argument("--steps-per-frame", type=int, default=1, help="Generator steps per animation tick")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--ascii", action="store_true", help="Print the finished maze as text")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")

    return parser

def run_generate(args, parser, logger) -> int:
    from maze_engine.algo.dfs import RecursiveBacktracker

    try:
        generator = RecursiveBacktracker(args.size, seed=args.seed)
    except InvalidDimension as e:
        parser.error(str(e))

    logger.info(f"Generating {args.size}x{args.size} maze (seed={args.seed})...")

    if args.visual or args.record:
        from maze_engine.viz.renderer import Renderer
        from maze_engine.viz.recorder import VideoRecorder

        logger.info("Visual mode enabled - Opening window...")
        renderer = Renderer(
            generator,
            interval_ms=args.interval,
            steps_per_frame=args.steps_per_frame,
            record=args.record,
        )

        # Auto-Name Recording
        if args.record:
            os.makedirs("recordings", exist_ok=True)
            renderer.recorder.output_file = VideoRecorder.default_filename(prefix=f"gen_{args.size}x{args.size}")
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        generator.start()
        renderer.init_window()
        renderer.run_loop()

        if renderer.video_path:
            logger.info(f"Video saved: {renderer.video_path} ({renderer.recorder.frame_count} frames)")
    else:
        logger.info("Headless generation...")
        generator.generate()

    if not generator.is_complete():
        logger.info("Window closed before generation finished.")
        return 0

    logger.info(f"Done in {generator.step_count} steps ({generator.carve_count} passages carved).")
    view = generator.view()

    if args.stats:
        from maze_engine.core.complexity import MazeAnalyzer
        logger.info(f"Stats: {MazeAnalyzer.calculate_stats(view)}")
        logger.info(f"Verification: {MazeAnalyzer.verify_perfect(view)}")

    if args.ascii:
        from maze_engine.viz.text import render_ascii
        print(render_ascii(view), end="")

    return 0

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_engine")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args, parser, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
