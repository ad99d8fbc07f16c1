"""Service layer: wraps domain construction in ServiceResult outcomes."""
