"""Terminal Minesweeper: board engine plus curses and pygame front ends."""
