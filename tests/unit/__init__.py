"""Unit tests for individual components in isolation.

Coverage:
    - agent/: ChatAI turn history, Agno backend sessions, configuration
    - models/: ReplyRequest validation and the response mode catalogue
    - ui/: ReplyController request cycle

Uses fakes and mocks for the model provider. Leverages pytest-check for
multiple assertions per test.
"""
