"""
DOMAIN LAYER - Rooms, participants and membership rules

This layer contains:
- Entities: Room aggregate, User, Wish
- Value Objects: UserId, RoomId, UserCode
- Ports: Repository interfaces that infrastructure implements
- Shared: Result container and validation error taxonomy

RULES:
1. NO framework imports (no FastAPI, Dishka, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
4. Expected failures are returned as Failure results, never raised
"""
