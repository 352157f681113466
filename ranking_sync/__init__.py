"""Leaderboard synchronization for end-of-play score entry."""
