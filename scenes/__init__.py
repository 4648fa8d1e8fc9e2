"""scenes — pygame scenes (room view) and their drawing helpers."""
