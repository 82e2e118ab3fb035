import logging

import pygame

logger = logging.getLogger(__name__)


class Job:
    def __init__(self, interval, callback):
        self.interval = float(interval)
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def __repr__(self):
        return f"<Job interval={self.interval:.4f} cancelled={self.cancelled}>"


class ManualScheduler:
    """
    Scheduler driven by hand: `advance(n)` fires every live job n times.
    No real time passes, which keeps tests deterministic.
    """
    def __init__(self):
        self.jobs = []

    def schedule_interval(self, interval, callback):
        job = Job(interval, callback)
        self.jobs.append(job)
        return job

    def active_jobs(self):
        return [j for j in self.jobs if not j.cancelled]

    def advance(self, ticks=1):
        for _ in range(ticks):
            for job in self.active_jobs():
                # a callback may cancel a later job
                if not job.cancelled:
                    job.callback()
        self.jobs = self.active_jobs()


class PygameScheduler:
    """
    Frame loop paced by pygame.time.Clock.

    Every frame the host's `poll` runs first (event handling); it returns False
    to leave the loop. Live jobs run next, then the display is flipped. Frames
    are paced to the fastest scheduled job.
    """
    def __init__(self, fps=60, flip=True):
        self.fps = fps
        self.flip = flip
        self.jobs = []
        self.clock = pygame.time.Clock()

    def schedule_interval(self, interval, callback):
        job = Job(interval, callback)
        self.jobs.append(job)
        self.fps = max(1, round(1.0 / job.interval))
        return job

    def run(self, poll=None, after_frame=None):
        logger.info("Frame loop running at %d fps", self.fps)
        while True:
            if poll is not None and not poll():
                break
            for job in [j for j in self.jobs if not j.cancelled]:
                job.callback()
            self.jobs = [j for j in self.jobs if not j.cancelled]
            if after_frame is not None:
                after_frame()
            if self.flip:
                pygame.display.flip()
            self.clock.tick(self.fps)
        logger.info("Frame loop stopped")
