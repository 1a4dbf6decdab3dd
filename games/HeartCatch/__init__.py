"""HeartCatch - falling-hearts mini-game."""
