"""Small built-in datasets, one comma-separated basket per line."""

SAMPLE_DATASETS = {
    "market_basket": """Milk, Bread, Butter
Bread, Diapers, Beer, Eggs
Milk, Diapers, Beer, Cola
Bread, Milk, Diapers, Beer
Bread, Milk, Diapers, Cola""",
    "simple": """A, B, C
A, B
A, C
B, C
A, B, C""",
    "grocery": """Bread, Milk
Bread, Diapers, Beer, Eggs
Milk, Diapers, Beer, Cola
Bread, Milk, Diapers, Beer
Bread, Milk, Diapers, Cola
Bread, Milk
Milk, Diapers, Beer
Bread, Diapers, Cola""",
    "restaurant": """Burger, Fries, Coke
Pizza, Salad, Water
Burger, Fries, Shake
Pizza, Fries, Coke
Burger, Salad, Coke
Pizza, Fries, Shake
Burger, Fries, Coke
Pizza, Salad, Coke""",
}
