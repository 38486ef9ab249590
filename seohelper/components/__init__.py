"""
SEO entity components.

Each component owns one renderable piece of <head> markup;
seo_meta aggregates them.
"""
