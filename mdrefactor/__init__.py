"""
mdrefactor - A tool to refactor Markdown documents using a chat-completion API.
"""

__version__ = "0.1.0"
