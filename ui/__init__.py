"""Interactive front ends for the Klondike engine."""
