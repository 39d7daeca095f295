"""Updaters for timing, options, clock, food, bugs and overlay, run once per frame."""