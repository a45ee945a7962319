"""
Manifest utilities: the list of routes processed by a crawl.
Written once at the end of a crawl as a plain text file, one route per line.
"""

import logging
import os
from typing import Iterable, Optional


DEFAULT_MANIFEST_NAME = "routes.txt"


class Manifest:
    def __init__(self, output_dir: str, name: str = DEFAULT_MANIFEST_NAME):
        self.output_dir = output_dir
        self.path = os.path.join(self.output_dir, name)
        self.logger = logging.getLogger(__name__)

    def write(self, routes: Iterable[str]) -> Optional[str]:
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write("\n".join(routes))
            self.logger.info(f"Saved list of routes to: {self.path}")
            return self.path
        except OSError as e:
            self.logger.error(f"Error saving route list: {e}")
            return None

