"""HeartCatch - Game Info

Catch falling hearts with a basket, dodge broken ones, grab power-ups.
Reach 100 love points before the minute is up.
"""

NAME = "Heart Catch"
DESCRIPTION = "Catch falling hearts for love points. 100 points wins."
VERSION = "1.0.0"
AUTHOR = "Valentine Team"

ARGUMENTS = [
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for heart and power-up spawns'
    },
]


def get_game_mode(**kwargs):
    """Factory function to create game mode instance."""
    from games.HeartCatch.game_mode import HeartCatchMode
    return HeartCatchMode(**kwargs)
