"""Static HTML for the root page."""
import html
from string import Template

INDEX_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <title>$app_name - Health Check Service</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 40px; background: #f5f5f5; }
        .container { background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        h1 { color: #333; }
        .version { color: #666; font-size: 14px; }
        ul { line-height: 1.8; }
        a { color: #0066cc; text-decoration: none; }
        a:hover { text-decoration: underline; }
        code { background: #f0f0f0; padding: 2px 6px; border-radius: 3px; }
    </style>
</head>
<body>
    <div class="container">
        <h1>$app_name - Health Check Service</h1>
        <p class="version">Version: $version</p>
        <p>A lightweight HTTP service for monitoring port availability.</p>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/health"><code>/health</code></a> - Detailed health status with all port checks (JSON)</li>
            <li><a href="/live"><code>/live</code></a> - Simple liveness check (returns OK)</li>
        </ul>
        <h2>Configuration:</h2>
        <p>Monitoring <strong>$count ports</strong></p>
    </div>
</body>
</html>
""")


def render_index(*, app_name: str, version: str, target_count: int) -> str:
    # "ports" stays plural for every count, including 1.
    return INDEX_TEMPLATE.substitute(
        app_name=html.escape(app_name),
        version=html.escape(version),
        count=target_count,
    )
