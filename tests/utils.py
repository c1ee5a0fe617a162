import pandas as pd


def read_weather_dataset() -> tuple[pd.DataFrame, pd.Series]:
    X = pd.DataFrame(
        [
            ["sunny", "summer"],
            ["sunny", "summer"],
            ["cloudy", "winter"],
            ["sunny", "winter"],
        ],
        columns=["sky", "season"],
    )
    y = pd.Series(["hot", "hot", "cold", "cold"], name="temperature")
    return X, y


def read_rental_dataset() -> tuple[pd.DataFrame, pd.Series]:
    # Data from: Christoph Molnar's "Interpretable Machine Learning",
    # licensed under https://creativecommons.org/licenses/by-nc-sa/4.0/
    X = pd.DataFrame(
        [
            ["good", "small", "yes"],
            ["good", "big", "no"],
            ["good", "big", "no"],
            ["bad", "medium", "no"],
            ["good", "medium", "only cats"],
            ["good", "small", "only cats"],
            ["bad", "medium", "yes"],
            ["bad", "small", "yes"],
            ["bad", "medium", "yes"],
            ["bad", "small", "no"],
        ],
        columns=["location", "size", "pets"],
    )
    y = pd.Series(
        [
            "high",
            "high",
            "high",
            "medium",
            "medium",
            "medium",
            "medium",
            "low",
            "low",
            "low",
        ],
        name="value",
    )
    return X, y
