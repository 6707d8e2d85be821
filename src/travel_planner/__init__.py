"""AI travel planner backend."""
