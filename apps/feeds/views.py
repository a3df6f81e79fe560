"""
Plain Django views served outside the API prefix.
"""

from django.http import HttpRequest, HttpResponse
from django.views.decorators.http import require_GET


@require_GET
def robots_txt(request: HttpRequest) -> HttpResponse:
    lines = [
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin/",
        "Disallow: /api/",
        "",
        f"Sitemap: {request.build_absolute_uri('/api/sitemap')}",
    ]
    return HttpResponse("\n".join(lines) + "\n", content_type="text/plain")
