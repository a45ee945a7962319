"""
SiteScribe: Single-Site Crawler & Document Converter

A utility for collecting the internal links of a website's seed page,
fetching each linked page, reducing it to a small set of structural tags,
and saving the result as plain-text and Word documents for offline reading.
"""

__version__ = "1.0"
__author__ = "SiteScribe Project"
__description__ = "Single-Site Crawler & Document Converter"
