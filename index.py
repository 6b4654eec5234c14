from http.server import BaseHTTPRequestHandler

from profile_stats.card import _respond_with_card


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        _respond_with_card(self)
