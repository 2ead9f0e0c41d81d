"""README and example page generated alongside the distribution files."""

from __future__ import annotations

from datetime import datetime
from typing import Dict

from src.banners import format_timestamp


def _kb(size_bytes: int) -> str:
    return f"{size_bytes / 1024:.2f} KB"


def _script_src(output_dir: str, name: str) -> str:
    return f"/{output_dir.strip('/')}/{name}"


def render_readme(
    generated_at: datetime,
    output_dir: str,
    file_names: Dict[str, str],
    sizes: Dict[str, int],
) -> str:
    """Render the distribution README.

    ``sizes`` holds on-disk byte sizes keyed by ``runtime``, ``config`` and
    ``bundle``; each row shows the size in KB and the exact byte count.
    """
    runtime = file_names["runtime"]
    config = file_names["config"]
    bundle = file_names["bundle"]
    rows = [
        (runtime, sizes["runtime"], "Tailwind CSS engine"),
        (config, sizes["config"], "Custom theme (minified)"),
        (bundle, sizes["bundle"], "Combined (all-in-one)"),
    ]
    table = "\n".join(
        f"| {name} | {_kb(size)} | {size} | {purpose} |" for name, size, purpose in rows
    )
    dist = output_dir.strip("/")

    return f"""# SkyCMS Tailwind CSS Distribution

Generated on: {format_timestamp(generated_at)}

## Files Included

### Option 1: Separate Files (Recommended)
- **{runtime}** - Tailwind CSS engine (with banner comments)
- **{config}** - Your custom theme configuration (minified + banner)

**Usage:**
```html
<script src="{_script_src(output_dir, config)}"></script>
<script src="{_script_src(output_dir, runtime)}"></script>
```

**Benefits:**
- Configuration cached separately
- Update config without re-downloading engine
- Better cache efficiency

### Option 2: Combined Bundle
- **{bundle}** - Everything in one file (minified + banner)

**Usage:**
```html
<script src="{_script_src(output_dir, bundle)}"></script>
```

**Benefits:**
- Single HTTP request
- Simpler deployment

## File Sizes

All files include informative banner comments explaining their purpose.

| File | Size | Bytes | Purpose |
|------|------|-------|---------|
{table}

## Deployment

1. Copy `{dist}/` contents to your web server
2. Reference the files in your SkyCMS page templates
3. All Tailwind classes will work dynamically

## Cache Strategy

**For best performance, configure your web server:**

### Nginx
```nginx
location ~* \\.js$ {{
  expires 1y;
  add_header Cache-Control "public, immutable";
}}
```

### Apache
```apache
<FilesMatch "\\.(js)$">
  Header set Cache-Control "max-age=31536000, public, immutable"
</FilesMatch>
```

## Production Notes

- **Production Ready** - No CDN warnings
- **Self-Hosted** - Full control
- **Minified** - Configuration is minified for optimal size
- **Dynamic** - Works with any Tailwind class
- **Cacheable** - Browser caching supported
- **Documented** - All files include banner comments
- **Theme Included** - Custom colors, fonts, animations

## Support

For more information about your custom theme, see `tailwind.config.js` in the project root.
"""


def render_example_template(output_dir: str, file_names: Dict[str, str]) -> str:
    config_src = _script_src(output_dir, file_names["config"])
    runtime_src = _script_src(output_dir, file_names["runtime"])
    bundle_src = _script_src(output_dir, file_names["bundle"])

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>SkyCMS Page Template</title>

  <!-- SkyCMS Tailwind Distribution (Separate Files - Recommended) -->
  <script src="{config_src}"></script>
  <script src="{runtime_src}"></script>

  <!-- Alternative: Combined Bundle (Uncomment to use) -->
  <!-- <script src="{bundle_src}"></script> -->
</head>
<body class="bg-gray-50">

  <div class="container mx-auto px-4 py-12">
    <div class="bg-white rounded-lg shadow-lg p-8 max-w-4xl mx-auto">

      <header class="mb-8">
        <h1 class="text-4xl font-montserrat font-bold text-brand-500 mb-2">
          SkyCMS Page Template
        </h1>
        <p class="text-gray-600">Production-ready Tailwind CSS distribution with minified config</p>
      </header>

      <main class="space-y-6">

        <section class="bg-gradient-to-r from-brand-500 to-brand-700 text-white rounded-lg p-6">
          <h2 class="text-2xl font-bold mb-3">Custom Theme Works</h2>
          <p class="text-brand-100 mb-4">
            Brand colors, custom fonts, and animations are all included
          </p>
          <div class="flex gap-4">
            <button class="bg-accent-500 hover:bg-accent-600 px-6 py-3 rounded-lg font-semibold transition">
              Accent Button
            </button>
            <button class="bg-white text-brand-600 hover:bg-brand-50 px-6 py-3 rounded-lg font-semibold transition">
              Brand Button
            </button>
          </div>
        </section>

        <section class="bg-accent-50 border border-accent-200 rounded-lg p-6">
          <div class="text-center animate-float">
            <div class="text-6xl mb-4">&#127880;</div>
            <p class="font-montserrat font-semibold text-accent-700">
              Custom animations work out of the box
            </p>
          </div>
        </section>

        <section class="bg-blue-50 border-l-4 border-blue-500 p-6">
          <h3 class="font-bold text-blue-900 mb-2">Distribution Info</h3>
          <ul class="text-sm text-blue-800 space-y-1">
            <li>Self-hosted (no CDN)</li>
            <li>Production-ready (no warnings)</li>
            <li>Configuration minified</li>
            <li>All files have banner comments</li>
            <li>All Tailwind classes work</li>
            <li>Custom theme included</li>
            <li>Browser cacheable</li>
          </ul>
        </section>

      </main>

      <footer class="mt-8 pt-6 border-t border-gray-200 text-center text-sm text-gray-600">
        <p>Built with SkyCMS Tailwind Distribution</p>
        <p class="text-xs mt-1">Files include informative banner comments</p>
      </footer>

    </div>
  </div>

</body>
</html>
"""
