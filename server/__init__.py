"""REST front end for the Klondike engine."""
