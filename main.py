import argparse
import logging
from multiprocessing import Manager, Process

import pygame

import constants
import gui_controller as gui_ctrl
from ballsim.Vec2 import Vec2
from ballsim.config import SimulationConfig, load_config
from ballsim.errors import SpawnDensityError
from ballsim.logging_config import setup_logging
from ballsim.renderer import PygameRenderer
from ballsim.scheduler import PygameScheduler
from ballsim.world import World

logger = logging.getLogger("ballsim.app")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Elastic balls bouncing in a box. Click a ball to remove it.")
    parser.add_argument("--balls", type=int, default=None, help=f"number of balls (default {constants.N_BALL})")
    parser.add_argument("--width", type=float, default=None)
    parser.add_argument("--height", type=float, default=None)
    parser.add_argument("--fps", type=float, default=None, help="ticks per second")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", default=None, help="JSON file with simulation settings")
    parser.add_argument("--no-gui", action="store_true", help="do not open the control panel")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def build_config(args):
    overrides = {
        'ball_count': args.balls,
        'width': args.width,
        'height': args.height,
        'ticks_per_second': args.fps,
        'seed': args.seed,
    }
    if args.config:
        return load_config(args.config, **overrides)
    if overrides['ball_count'] is None:
        overrides['ball_count'] = constants.N_BALL
    return SimulationConfig(**{k: v for k, v in overrides.items() if v is not None}).validate()


def handle_click(world, pos):
    # pygame reports window coordinates; the arena fills the window
    return world.remove_at(Vec2(pos[0], pos[1]))


def respawn(world, n=None):
    """Respawn the arena. Returns an error message, or None when it worked."""
    try:
        world.respawn(n)
    except SpawnDensityError as exc:
        logger.error("Respawn failed, keeping %d balls: %s", len(world.balls), exc)
        return str(exc)
    return None


def apply_shared(world, scheduler, shared):
    """Apply control-panel requests. Returns False once the panel asked to exit."""
    if shared.get('toggle_pause', False):
        shared['toggle_pause'] = False
        toggle_pause(world, scheduler)
    if shared.get('respawn', False):
        shared['respawn'] = False
        shared['error'] = respawn(world, int(shared.get('ball_count', world.config.ball_count)))
    shared['paused'] = not world.running
    shared['balls_alive'] = len(world.balls)
    shared['ticks'] = world.ticks
    return not shared.get('__exit__', False)


def toggle_pause(world, scheduler):
    if world.running:
        world.stop()
    else:
        world.start(scheduler)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO), args.log_file)
    config = build_config(args)

    pygame.init()
    screen = pygame.display.set_mode((int(config.width), int(config.height)))
    pygame.display.set_caption("Bouncing Balls")
    font = pygame.font.Font(None, 32)

    renderer = PygameRenderer(screen, background=config.background)
    world = World(renderer, config)
    scheduler = PygameScheduler(fps=config.ticks_per_second)

    shared = None
    gui_proc = None
    if not args.no_gui:
        mgr = Manager()
        shared = mgr.dict()
        shared['ball_count'] = config.ball_count
        shared['toggle_pause'] = False
        shared['respawn'] = False
        shared['__exit__'] = False
        gui_proc = Process(target=gui_ctrl.run_gui, args=(shared,), daemon=True)
        gui_proc.start()

    def poll():
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                handle_click(world, event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    return False
                elif event.key == pygame.K_SPACE:
                    toggle_pause(world, scheduler)
                elif event.key == pygame.K_r:
                    error = respawn(world)
                    if shared is not None:
                        shared['error'] = error
        if shared is not None:
            return apply_shared(world, scheduler, shared)
        return True

    def hud():
        if not world.running:
            # no ticks while paused; redraw so clicks still show
            renderer.clear()
            world.render()
            renderer.draw_text(font, "PAUSED", (int(config.width) - 100, 10))
        renderer.draw_text(font, f"Balls: {len(world.balls)}", (10, int(config.height) - 30))

    world.start(scheduler)
    try:
        scheduler.run(poll=poll, after_frame=hud)
    finally:
        world.stop()
        if gui_proc is not None:
            shared['__exit__'] = True
            gui_proc.join(timeout=1.0)
        pygame.quit()


if __name__ == "__main__":
    main()
