# hcs2/__init__.py
"""
hcs2: create HCS-2 topics and submit HCS-2 registry messages from the terminal.
Thin interactive glue over the Hiero SDK: prompts, message shaping, signing and receipts.
"""

__version__ = "0.1.0.dev0"
