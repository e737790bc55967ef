"""
User Management Module

User CRUD with clear separation of concerns:
- domain: Domain models and handler results
- services: UserStore contract and its database-backed implementation
- repositories: Data access
- api: Request handler and REST API endpoints
"""
