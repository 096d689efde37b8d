"""Sitemap and robots.txt generation from the post listing."""

import datetime
from typing import Iterable, List, NamedTuple
from xml.etree import ElementTree

from app.schemas.blog import Post

_SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Top-level pages of the site, dated at launch
STATIC_ROUTES = ("", "blog", "about", "projects", "tags")


class SitemapEntry(NamedTuple):
    url: str
    last_modified: datetime.date
    change_frequency: str = "daily"
    priority: float = 0.8


def build_sitemap_entries(
    posts: Iterable[Post], site_url: str, launch_date: datetime.date
) -> List[SitemapEntry]:
    """Static routes first, then one ``blog/<slug>`` entry per post."""
    base = site_url.rstrip("/")
    entries = [
        SitemapEntry(
            url=f"{base}/{path}",
            last_modified=launch_date,
            priority=1.0 if path == "" else 0.8,
        )
        for path in STATIC_ROUTES
    ]
    for post in posts:
        entries.append(
            SitemapEntry(
                url=f"{base}/blog/{post.slug}",
                last_modified=post.published.date(),
            )
        )
    return entries


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    urlset = ElementTree.Element("urlset", xmlns=_SITEMAP_NS)
    for entry in entries:
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = entry.url
        ElementTree.SubElement(url, "lastmod").text = entry.last_modified.isoformat()
        ElementTree.SubElement(url, "changefreq").text = entry.change_frequency
        ElementTree.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    body = ElementTree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


def render_robots(site_url: str) -> str:
    base = site_url.rstrip("/")
    lines = [
        "User-Agent: *",
        "Allow: /",
        "",
        f"Host: {base}",
        f"Sitemap: {base}/sitemap.xml",
    ]
    return "\n".join(lines) + "\n"
