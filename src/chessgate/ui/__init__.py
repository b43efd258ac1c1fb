"""PyQt6 front end: board rendering and pointer input."""
