"""
Valentine - an animated proposal with a heart-catching finale.

Subpackages:
- valentine.scheduler: fixed-tick scheduler with tag-scoped timers
- valentine.input: key events and input sources
- valentine.app: screen state machine
- valentine.logging: project logger

Usage:
    from valentine.app import ValentineApp
    from valentine.scheduler import TickScheduler

    app = ValentineApp(TickScheduler())
"""

__version__ = "1.0.0"
