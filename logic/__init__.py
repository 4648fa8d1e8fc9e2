"""logic — Game systems package.

Top-level modules
-----------------
tick            — per-frame system orchestrator
clock           — game clock, wizard schedule, bells
movement        — player movement / collision
rooms           — exit handling, safe spawn snapping
danger          — suspicion meter and capture reset
interact        — E-key effects, inspect, inventory report
quests          — objective text
status          — HUD projections
input_manager   — raw input → intent mapping
"""
