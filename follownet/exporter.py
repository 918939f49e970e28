"""JSON graph exporter for d3.js visualization."""

import json
import math
from pathlib import Path
from typing import Dict

from follownet.network import Network


class GraphExporter:
    """Exports a network's follow graph to JSON format for d3.js."""

    def __init__(self, min_size: float = 8.0, max_size: float = 25.0):
        """Initialize exporter with the node size range."""
        self.min_size = min_size
        self.max_size = max_size

    def _calculate_node_size(self, followers_count: int) -> float:
        """Calculate node size based on follower count."""
        if followers_count <= 0:
            return self.min_size

        # Logarithmic scaling within [min_size, max_size]
        size = self.min_size + math.log2(1 + followers_count) * 3.0
        return min(self.max_size, max(self.min_size, size))

    def to_dict(self, network: Network) -> Dict:
        """Build the d3.js graph document for a network."""
        graph = network.to_networkx()
        most_popular = network.most_popular_user()

        nodes = []
        for node_id, data in graph.nodes(data=True):
            followers_count = data.get('followers', 0)
            nodes.append({
                'id': node_id,
                'label': node_id,
                'followers': followers_count,
                'following': data.get('followees', 0),
                'size': self._calculate_node_size(followers_count),
                'isPopular': node_id == most_popular
            })

        links = [
            {'source': source, 'target': target}
            for source, target in graph.edges()
        ]

        return {
            'nodes': nodes,
            'links': links,
            'metadata': {
                'userCount': len(nodes),
                'linkCount': len(links),
                'maxUsers': network.max_users,
                'mostPopular': most_popular
            }
        }

    def export(self, network: Network, output_file: str) -> str:
        """Export network to a JSON file and return its path."""
        graph_data = self.to_dict(network)

        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(graph_data, f, indent=2, ensure_ascii=False)

        return str(output_path)
