"""Solutions for days 1 to 7 of the 2024 puzzles."""