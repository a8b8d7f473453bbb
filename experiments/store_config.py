# experiments/store_config.py
import os
import sys

# Ensure storenav can be imported when running scripts from a source checkout
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from storenav.map.store_layout import Zone
from storenav.types import Coordinate


class StoreConfig:
    # --- Store Geometry ---
    WIDTH = 20                     # cells
    HEIGHT = 15                    # cells

    ENTRANCE = Coordinate(0, 14)
    CHECKOUT = Coordinate(19, 14)

    # --- Zones (shelves are blocked, customers walk the aisles between them) ---
    ZONES = [
        Zone("produce", "Produce", 1, 1, 4, 2),
        Zone("bakery", "Bakery", 7, 1, 4, 2),
        Zone("dairy", "Dairy", 13, 1, 5, 2),
        Zone("meat", "Meat & Deli", 1, 5, 2, 5),
        Zone("frozen", "Frozen Foods", 5, 5, 2, 5),
        Zone("beverages", "Beverages", 9, 5, 2, 5),
        Zone("snacks", "Snacks", 13, 5, 2, 5),
        Zone("personal_care", "Personal Care", 17, 5, 2, 5),
    ]

    # --- Catalog: item id -> zone id ---
    CATALOG = {
        "apples": "produce",
        "bananas": "produce",
        "lettuce": "produce",
        "bread": "bakery",
        "croissants": "bakery",
        "milk": "dairy",
        "cheese": "dairy",
        "yogurt": "dairy",
        "chicken": "meat",
        "ham": "meat",
        "ice_cream": "frozen",
        "frozen_pizza": "frozen",
        "water": "beverages",
        "orange_juice": "beverages",
        "chips": "snacks",
        "cookies": "snacks",
        "shampoo": "personal_care",
        "toothpaste": "personal_care",
    }

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "route_demo")
