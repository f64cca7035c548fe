"""Pong: a two-paddle table game with computer-steered paddles."""