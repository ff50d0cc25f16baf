"""NiceGUI interface - thin visualization layer over the reply controller.

Responsibilities:
    - Style grid, message box and interest/tone sliders
    - Generate button with in-flight state
    - Response card with scroll-to-response shortcut

Contains no business logic beyond what ReplyController exposes.
"""
