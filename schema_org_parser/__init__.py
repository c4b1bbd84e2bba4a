"""Extract schema.org terms and render them as text, SQL or JSON."""

__version__ = '0.5.0'
