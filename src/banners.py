"""Documentation banners prepended to generated distribution files."""

from __future__ import annotations

from datetime import datetime, timezone


_RUNTIME_BANNER = """/**
 * SkyCMS Tailwind Runtime
 *
 * This is the Tailwind CSS JavaScript engine that dynamically generates
 * CSS from HTML class names at runtime. It scans your HTML for Tailwind
 * classes and creates the corresponding styles on the fly.
 *
 * Usage: Load this after tailwind-config.js
 * Size: ~398 KB (minified)
 * Cache: Set to cache for 1 year for optimal performance
 *
 * Part of SkyCMS Tailwind Distribution
 * Generated: {generated}
 */

"""

_CONFIG_BANNER = """/**
 * SkyCMS Tailwind Configuration
 *
 * This file contains your custom Tailwind theme configuration including:
 * - Brand colors (cyan/teal palette)
 * - Accent colors (orange/yellow palette)
 * - Custom fonts (Montserrat, Roboto, Inter)
 * - Custom animations (float, slide-in, fade-in)
 *
 * Usage: Load this before tailwind-runtime.js
 * Size: ~2 KB (minified)
 * Cache: Update this file when theme changes
 *
 * Part of SkyCMS Tailwind Distribution
 * Generated: {generated}
 */

"""

_BUNDLE_BANNER = """/**
 * SkyCMS Tailwind Bundle (All-in-One)
 *
 * This combined file includes:
 * 1. Tailwind CSS Runtime Engine (~398 KB)
 * 2. Custom Theme Configuration (~2 KB)
 *
 * This is a convenience bundle that combines both the runtime engine
 * and configuration into a single file. Use this for simpler deployment,
 * but note that updating the config requires re-downloading the entire file.
 *
 * For better cache efficiency, consider using separate files:
 * - tailwind-config.js (2 KB, cache separately)
 * - tailwind-runtime.js (398 KB, cache separately)
 *
 * Usage: Load this single file instead of separate config + runtime
 * Size: ~400 KB (minified)
 * Cache: Set to cache for 1 year
 *
 * Part of SkyCMS Tailwind Distribution
 * Generated: {generated}
 */

"""

BANNER_TEMPLATES = {
    "runtime": _RUNTIME_BANNER,
    "config": _CONFIG_BANNER,
    "bundle": _BUNDLE_BANNER,
}


def format_timestamp(value: datetime) -> str:
    """Render a UTC timestamp as ISO-8601 with milliseconds, e.g. 2026-01-15T16:11:56.113Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_banner(kind: str, generated_at: datetime) -> str:
    template = BANNER_TEMPLATES.get(kind)
    if template is None:
        raise ValueError(f"Unknown banner kind: {kind}")
    return template.format(generated=format_timestamp(generated_at))
