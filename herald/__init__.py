"""
HERALD - Handy Entry Rules And Letter Drafter

Generates the four documents of a social-media giveaway campaign from one flat
record of campaign fields and a platform-specific template family.

Architecture:
- Templating Context: placeholder normalization, conditional line processing,
  date formatting, resolution and Markdown stripping
- Utils: logging, text and date helpers shared by the context
"""

__version__ = "0.1.0"
