# runners/run_snake.py
from __future__ import annotations
from typing import Any, Dict, Optional
from config import AppConfig
from core.interfaces import Audio, Clock, InputSource, Renderer, RoundResult, RoundSink, EAT, FAIL
from core.round_controller import RoundController
from core.round_log import RoundLogger, ConsoleRoundLogger
from core.tick import TickScheduler

def run_loop(
    cfg: AppConfig,
    *,
    clock: Clock,
    inputs: InputSource,
    renderer: Renderer,
    audio: Audio,
    round_sink: Optional[RoundSink] = None,
    controller: Optional[RoundController] = None,
    scheduler: Optional[TickScheduler] = None,
) -> Dict[str, Any]:
    """One frame per iteration: gated tick, input, draw. Runs until the input source asks to quit."""
    best = 0
    rounds = []

    game = controller or RoundController(cfg)
    prev_on_round_end = game.on_round_end

    def _on_round_end(result: RoundResult) -> None:
        if prev_on_round_end is not None:
            prev_on_round_end(result)
        rounds.append(result)
        if round_sink is not None:
            round_sink.log_round(result, elapsed=clock.now())

    game.on_round_end = _on_round_end
    gate = scheduler or TickScheduler()

    frames = 0
    while True:
        if gate.should_tick(cfg.tick_interval, clock.now()):
            for ev in game.update():
                if ev == EAT:
                    audio.play_eat()
                elif ev == FAIL:
                    audio.play_fail()
                    audio.restart_music()
            best = max(best, game.score)

        frame_in = inputs.poll()
        if frame_in.quit:
            break
        game.apply_input(frame_in.headings)

        renderer.draw(game.snapshot())
        clock.tick(cfg.fps)
        frames += 1

    return {
        "frames": frames,
        "rounds": rounds,
        "score": game.score,
        "best": best,
        "snapshot": game.snapshot(),
    }

def main(cfg: AppConfig, headless: bool = False, max_frames: Optional[int] = None, script=None) -> Dict[str, Any]:
    cfg.validate()
    print("Starting the game...")

    if headless:
        from viz.renderer_headless import HeadlessRenderer, SimClock, ScriptedInput
        from viz.audio import SilentAudio
        rend = HeadlessRenderer(keep_frames=False)
        clock = SimClock()
        inputs = ScriptedInput(script, max_frames=max_frames if max_frames is not None else cfg.fps * 10)
        audio = SilentAudio()
    else:
        from viz.renderer_pygame import PygameRenderer
        from viz.audio import PygameAudio
        from viz.keyboard import Keyboard
        from viz.clock import PygameClock
        rend = PygameRenderer()
        audio = PygameAudio(cfg)
        inputs = Keyboard()

    sink = None
    try:
        if cfg.round_log_path:
            sink = RoundLogger(cfg.round_log_path, verbose=cfg.verbose)
        elif cfg.verbose:
            sink = ConsoleRoundLogger()

        rend.open(cfg)
        if not headless:
            # pygame.init() happened in open(); ticks count from there
            clock = PygameClock()
            audio.open()
        summary = run_loop(cfg, clock=clock, inputs=inputs, renderer=rend, audio=audio, round_sink=sink)
    finally:
        audio.close()
        rend.close()
        if sink is not None:
            sink.close()

    if cfg.verbose:
        print(f"frames={summary['frames']} rounds={len(summary['rounds'])} best={summary['best']}")
    return summary
