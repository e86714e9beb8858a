"""CLI entry point for pathline."""

import argparse
import logging
import sys
from pathlib import Path

from pathline.config import load_config
from pathline.scene import Scene
from pathline.timeline import duration_seconds

logger = logging.getLogger(__name__)


def _print_timeline(scene: Scene) -> None:
    timeline = scene.timeline
    print(f"{'id':>4} {'progress':>8} {'move':>6} {'arrive':>6} {'pause':>6} {'resume':>6}  text")
    for evt in timeline.events:
        cp = evt.checkpoint
        print(
            f"{cp.id:>4} {cp.path_progress:>8.3f} {evt.start_move_frame:>6} {evt.arrival_frame:>6} "
            f"{evt.pause_duration:>6} {evt.resume_frame:>6}  {cp.text}"
        )
    fps = scene.config.fps
    print(
        f"\nFinal frame: {timeline.final_frame} "
        f"({duration_seconds(timeline, fps):.2f}s at {fps}fps), total pause {timeline.total_pause}"
    )


def _print_frame(scene: Scene, frame: int) -> None:
    state = scene.frame_state(frame)
    print(
        f"frame {frame}: progress {state.render.visible_progress:.4f}, "
        f"flow time {state.render.flow_time:g}, drawn {state.drawn_length:.1f}/{state.path_length:.1f}"
    )
    for m in state.markers:
        r = m.reveal
        print(
            f"  [{m.checkpoint_id}] {r.phase.value:<15} appear {r.appear_fraction:.3f} "
            f"chars {r.visible_char_count}/{len(m.text)} {r.visible_text!r}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Path draw timeline scheduler")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML config file")
    sub = parser.add_subparsers(dest="command")

    # compile command
    compile_parser = sub.add_parser("compile", help="Show the compiled checkpoint timeline")
    compile_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging",
    )

    # frame command
    frame_parser = sub.add_parser("frame", help="Resolve a single frame")
    frame_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging",
    )
    frame_parser.add_argument("frame", type=int, help="Absolute frame number")
    frame_parser.add_argument("--json", action="store_true", help="Print the full state as JSON")

    # frames command
    frames_parser = sub.add_parser("frames", help="Dump frame states as JSON lines")
    frames_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging",
    )
    frames_parser.add_argument("--start", type=int, default=0)
    frames_parser.add_argument(
        "--end", type=int, default=None,
        help="Last frame (inclusive). Defaults to the timeline's final frame.",
    )
    frames_parser.add_argument("-o", "--output", type=Path, default=None, help="Write to file instead of stdout")

    # preview command
    preview_parser = sub.add_parser("preview", help="Render one frame to a PNG")
    preview_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging",
    )
    preview_parser.add_argument("frame", type=int, help="Absolute frame number")
    preview_parser.add_argument("-o", "--output", type=Path, default=Path("preview.png"))

    args = parser.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (ValueError, FileNotFoundError) as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    scene = Scene(config)

    if args.command == "compile":
        _print_timeline(scene)

    elif args.command == "frame":
        if args.json:
            print(scene.frame_state(args.frame).model_dump_json(indent=2))
        else:
            _print_frame(scene, args.frame)

    elif args.command == "frames":
        end = args.end if args.end is not None else scene.final_frame
        if end < args.start:
            logger.error("--end (%d) is before --start (%d)", end, args.start)
            sys.exit(1)
        out = args.output.open("w") if args.output else sys.stdout
        try:
            for state in scene.frames(args.start, end + 1):
                out.write(state.model_dump_json() + "\n")
        finally:
            if args.output:
                out.close()
        if args.output:
            logger.info("Wrote frames %d..%d to %s", args.start, end, args.output)

    elif args.command == "preview":
        from pathline.output.preview import save_preview

        save_preview(scene.frame_state(args.frame), config, args.output)
        print(f"Output: {args.output}")

    else:
        parser.print_help()


if __name__ == "__main__":
    main()
