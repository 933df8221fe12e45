#!/usr/bin/env python3
"""
Flask preview server for the blog.
Features: live RSS route, JSON article listing, static serving of the built site.
"""

from flask import Flask, jsonify, Response, send_from_directory, abort
from flask_caching import Cache
from flask_compress import Compress
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from mdblog.content.collection import load_collection, published
from mdblog.feeds.rss import build_rss
from mdblog.rendering.markdown_pipeline import render_markdown
from mdblog.rendering.reading_time import reading_time
from mdblog.site.config import load_site_config

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['JSON_SORT_KEYS'] = False

# Initialize extensions
cache = Cache(app, config={
    'CACHE_TYPE': os.environ.get('CACHE_TYPE', 'SimpleCache'),
    'CACHE_DEFAULT_TIMEOUT': int(os.environ.get('CACHE_TIMEOUT', '300')),
})
compress = Compress(app)


def _cacheable(rv):
    """Only successful responses go into the cache"""
    status = rv[1] if isinstance(rv, tuple) else getattr(rv, 'status_code', 200)
    return status == 200


def _articles():
    config = load_site_config()
    return config, load_collection(config.content_dir)


@app.route('/rss.xml')
@cache.cached(timeout=300, response_filter=_cacheable)
def rss_feed():
    """RSS 2.0 feed generated from the content collection"""
    try:
        config, articles = _articles()
        xml = build_rss(articles, config)
    except Exception as e:
        logger.error(f"Error generating RSS feed: {e}")
        return Response('Error generating RSS feed', status=500, mimetype='text/plain')
    return Response(xml, mimetype='application/rss+xml')


@app.route('/api/articles')
@cache.cached(timeout=300, response_filter=_cacheable)
def get_articles():
    """Published articles, newest first"""
    try:
        config, articles = _articles()
    except Exception as e:
        logger.error(f"Error loading articles: {e}")
        return jsonify({'success': False, 'error': 'Failed to load articles'}), 500

    items = []
    for a in published(articles):
        doc = render_markdown(a.body, site_host=config.site_host)
        items.append({
            'id': a.id,
            'title': a.title,
            'description': a.description,
            'date': a.date.isoformat(),
            'tags': list(a.tags),
            'series': a.series,
            'url': config.absolute_url(a.url_path),
            'reading_time': reading_time(doc.html),
        })
    return jsonify({'success': True, 'articles': items, 'count': len(items)})


@app.errorhandler(404)
def not_found(error):
    """Custom 404 handler"""
    output_dir = Path(load_site_config().output_dir).resolve()
    if (output_dir / '404.html').is_file():
        return send_from_directory(output_dir, '404.html'), 404
    return Response('Not found', status=404, mimetype='text/plain')


# Built site (registered last so the routes above win)
@app.route('/', defaults={'path': ''})
@app.route('/<path:path>')
def serve(path):
    """Serve the built static site with index.html resolution"""
    output_dir = Path(load_site_config().output_dir).resolve()
    target = (output_dir / path).resolve()
    if output_dir != target and output_dir not in target.parents:
        abort(404)
    if target.is_dir():
        if not (target / 'index.html').is_file():
            abort(404)
        return send_from_directory(target, 'index.html')
    if target.is_file():
        return send_from_directory(output_dir, path)
    abort(404)


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 1234))
    debug = os.environ.get('FLASK_ENV') == 'development'

    logger.info(f"Starting preview server on port {port}")
    app.run(host='0.0.0.0', port=port, debug=debug)
