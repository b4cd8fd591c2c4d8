"""Domain layer - one bounded context per design principle.

- door: single responsibility
- weapon: open/closed
- request: Liskov substitution
- space: interface segregation
- time_travel: dependency inversion
"""
