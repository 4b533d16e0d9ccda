"""Timestamped event lines for moves, jumps and results."""

import datetime


def log_event(message, now=None):
    stamp = (now or datetime.datetime.now()).strftime("%H:%M:%S")
    print(f"[{stamp}] {message}", flush=True)


def silent(message):
    pass
