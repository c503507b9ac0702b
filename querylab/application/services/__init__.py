"""
Application services.

Exports:
  - MemberQueryService: Member/Team query walkthrough
"""

from querylab.application.services.member_query_service import MemberQueryService

__all__ = ["MemberQueryService"]
