"""Flappy Bird: a side-scrolling game of flapping between logs."""