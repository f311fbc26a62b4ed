import logging

from labelframe import Config, DataFrame, Series

logging.basicConfig(level=logging.INFO)

employees = Series(
    [10, 15, 8, 12, 20],
    Config(
        multi_index=[
            ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
            ["Shop A", "Shop B", "Shop A", "Shop A", "Shop B"],
        ],
        multi_index_names=["city", "shop"],
        name="n_employees",
    ),
)
print(employees)
print(employees.group_by_index().sum())
print(employees.describe())

df = DataFrame(
    {"quantity": [8, 8, 7], "price": [66.5, 38.72, 77.46]},
    Config(index=["Videogame", "Laptop", "Laptop"], index_name="product"),
)
print(df)
print(df.mean())
print(df.col("missing"))
