#!/usr/bin/env python3
"""localekit demo kiosk.

Shows the configured labels in a pygame window.

Keys:
    L      next language
    R      reload the translation document
    Esc    quit

``--dump`` prints every label for the current language and exits without
opening a window.
"""

import argparse
import os
import sys

import pygame

from localekit.__version__ import __version__
from localekit.app_context import AppContext, build_app_context, load_translations, shutdown_app
from localekit.core.config_loader import PROJECT_ROOT, load_config, override_from_args
from localekit.core.localization import TranslationSourceError
from localekit.core.logging_utils import configure_logging, setup_logger
from localekit.ui.bound_label import BoundLabel
from localekit.ui.components import TextLabel

logger = setup_logger("localekit")

BACKGROUND = (0, 0, 0)
FOREGROUND = (0, 255, 70)
LINE_SPACING = 1.6
MARGIN = 40
FPS = 30


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="localekit demo kiosk")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=str, help="Base config file (default: config/base.yaml)")
    parser.add_argument("--xml", type=str, help="Translation document path")
    parser.add_argument("--url", type=str, help="Translation document URL")
    parser.add_argument("--language", type=str, help="Switch to this language on startup")
    parser.add_argument("--dump", action="store_true", help="Print labels and exit")
    parser.add_argument("--fullscreen", action="store_true", help="Run in fullscreen mode")
    parser.add_argument("--resolution", type=str, help="Display resolution (e.g., 800x480)")
    return parser.parse_args(argv)


def create_bindings(ctx: AppContext) -> list[tuple[TextLabel, BoundLabel]]:
    """Create one TextLabel + BoundLabel pair per configured label.

    Args:
        ctx: Application context

    Returns:
        List of (label, binding) pairs, already attached
    """
    render = ctx.config.get("render", {})
    font_size = render.get("font_size", 32)
    line_height = int(font_size * LINE_SPACING)

    pairs = []
    for index, label_cfg in enumerate(ctx.config.get("labels", [])):
        label = TextLabel(
            label_cfg.get("text", ""),
            position=(MARGIN, MARGIN + index * line_height),
            color=FOREGROUND,
            font_size=font_size,
        )
        binding = BoundLabel(ctx.store, label_cfg["key"])
        binding.attach(label)
        pairs.append((label, binding))
    return pairs


def next_language(ctx: AppContext) -> str | None:
    """Return the language after the current one, wrapping around."""
    languages = ctx.store.languages()
    if not languages:
        return None

    current = ctx.store.current_language.lower()
    lowered = [lang.lower() for lang in languages]
    if current in lowered:
        return languages[(lowered.index(current) + 1) % len(languages)]
    return languages[0]


def dump_labels(ctx: AppContext, pairs, out=None):
    """Print ``key<TAB>text`` for every bound label."""
    out = out or sys.stdout
    print(f"# language: {ctx.store.current_language}", file=out)
    for label, binding in pairs:
        print(f"{binding.key}\t{label.text}", file=out)


def run_kiosk(ctx: AppContext, pairs):
    """Run the pygame loop until the window is closed."""
    render = ctx.config.get("render", {})
    os.environ.setdefault("SDL_VIDEO_ALLOW_SCREENSAVER", "0")

    pygame.init()
    flags = pygame.FULLSCREEN if render.get("fullscreen", False) else 0
    screen = pygame.display.set_mode(tuple(render.get("resolution", [800, 480])), flags)
    pygame.display.set_caption(render.get("title", "localekit"))
    clock = pygame.time.Clock()

    status = TextLabel(color=(120, 120, 120), font_size=max(12, render.get("font_size", 32) // 2))
    status.position = (MARGIN, screen.get_height() - MARGIN)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_l:
                        language = next_language(ctx)
                        if language:
                            ctx.store.set_language(language)
                    elif event.key == pygame.K_r:
                        try:
                            load_translations(ctx)
                        except TranslationSourceError as e:
                            logger.error(str(e))

            status.text = f"{ctx.store.current_language}  [L] language  [R] reload  [Esc] quit"

            screen.fill(BACKGROUND)
            for label, _binding in pairs:
                label.draw(screen)
            status.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        for _label, binding in pairs:
            binding.detach()
        pygame.quit()


def main(argv=None) -> int:
    args = parse_arguments(argv)
    cfg = load_config(args.config)
    override_from_args(cfg, args)
    configure_logging(cfg.get("logging", {}), base_dir=PROJECT_ROOT)
    logger.info(f"localekit {__version__} starting")

    ctx = build_app_context(cfg)

    try:
        result = load_translations(ctx)
    except (TranslationSourceError, ValueError) as e:
        logger.error(str(e))
        return 1

    if not result.ok:
        logger.warning("Continuing without translations; labels keep their design-time text")

    if args.language:
        ctx.store.set_language(args.language)

    pairs = create_bindings(ctx)

    try:
        if args.dump:
            dump_labels(ctx, pairs)
        else:
            run_kiosk(ctx, pairs)
    finally:
        shutdown_app(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
