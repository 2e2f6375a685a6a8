"""NiceGUI interface - thin chat sidebar in front of the completion proxy.

Responsibilities:
    - Conversation state for one sidebar session (panel)
    - HTTP calls to the completion proxy (client)
    - Message rendering and input handling (chat_page)

Contains no prompt logic. Delegates every question to the API.
"""
