"""
Fashion retail profile source data.

This profile describes a mid-size apparel chain ("FashionForward") with
mall, street, outlet and flagship locations across five US regions.

All data is synthetic and safe for demo purposes.
"""

BRAND_NAME = "FashionForward"

REGIONS = ["Northeast", "Southeast", "Midwest", "Southwest", "West"]

STORE_TYPES = ["Mall", "Street", "Outlet", "Flagship"]

CATEGORIES = ["Men's", "Women's", "Children's", "Accessories", "Footwear"]

DEPARTMENTS = [
    "Men's Casual",
    "Men's Formal",
    "Women's Casual",
    "Women's Formal",
    "Women's Athletic",
    "Children's",
    "Accessories",
    "Footwear",
]

TIME_RANGES = [
    "Today",
    "Yesterday",
    "Last 7 Days",
    "Last 30 Days",
    "This Month",
    "Last Month",
    "This Quarter",
    "Last Quarter",
    "YTD",
    "Last Year",
]

CITIES_BY_REGION = {
    "Northeast": ["New York", "Boston", "Philadelphia", "Washington DC", "Pittsburgh"],
    "Southeast": ["Miami", "Atlanta", "Charlotte", "Nashville", "Orlando"],
    "Midwest": ["Chicago", "Detroit", "Minneapolis", "Cleveland", "Indianapolis"],
    "Southwest": ["Dallas", "Houston", "Phoenix", "Austin", "San Antonio"],
    "West": ["Los Angeles", "San Francisco", "Seattle", "Portland", "Denver"],
}

# Very approximate (lat, lng) center points
REGION_CENTERS = {
    "Northeast": (40.7, -74.0),
    "Southeast": (33.7, -84.4),
    "Midwest": (41.9, -87.6),
    "Southwest": (32.8, -96.8),
    "West": (34.0, -118.2),
}

STREETS = [
    "Fashion Ave",
    "Retail Row",
    "Main St",
    "Market St",
    "Commerce Blvd",
    "Shopping Center Dr",
]

FIRST_NAMES = [
    "Alex",
    "Sarah",
    "Michael",
    "Jessica",
    "David",
    "Emily",
    "James",
    "Jennifer",
    "Robert",
    "Lisa",
]

LAST_NAMES = [
    "Johnson",
    "Smith",
    "Williams",
    "Brown",
    "Jones",
    "Miller",
    "Davis",
    "Garcia",
    "Rodriguez",
    "Wilson",
]

POSITIONS = [
    "Sales Associate",
    "Department Lead",
    "Assistant Manager",
    "Store Manager",
    "Inventory Specialist",
]

PRODUCTS = {
    "Men's": [
        "Classic Button-Down Shirt",
        "Slim-Fit Jeans",
        "Wool Blazer",
        "Cotton T-Shirt",
        "Chino Pants",
    ],
    "Women's": [
        "Designer Denim Jacket",
        "Floral Sundress",
        "Cashmere Sweater",
        "Silk Blouse",
        "Tailored Pants",
    ],
    "Children's": [
        "Graphic T-Shirt",
        "Denim Overalls",
        "Colorful Leggings",
        "School Uniform",
        "Puffer Jacket",
    ],
    "Accessories": [
        "Leather Belt",
        "Designer Sunglasses",
        "Winter Scarf",
        "Statement Necklace",
        "Leather Wallet",
    ],
    "Footwear": [
        "Running Sneakers",
        "Leather Boots",
        "Casual Loafers",
        "Dress Shoes",
        "Summer Sandals",
    ],
}

__all__ = [
    "BRAND_NAME",
    "CATEGORIES",
    "CITIES_BY_REGION",
    "DEPARTMENTS",
    "FIRST_NAMES",
    "LAST_NAMES",
    "POSITIONS",
    "PRODUCTS",
    "REGION_CENTERS",
    "REGIONS",
    "STORE_TYPES",
    "STREETS",
    "TIME_RANGES",
]
