"""
Example: simple linear regression with TensorFlow.

Fits y = 2x + 1 (plus a little noise) and predicts an unseen point.
"""

import random

from ai_megarepo import load_settings
from ai_megarepo.local_models import LinearRegressionHelper


def linear_regression_example():
    print("Running linear regression example")

    helper = LinearRegressionHelper(load_settings())
    helper.initialize()

    x_data = [float(x) for x in range(1, 11)]
    y_data = [2 * x + 1 + (random.random() - 0.5) * 0.5 for x in x_data]
    print(f"Training data: x={x_data}")
    print(f"               y={[round(y, 2) for y in y_data]}")

    model = helper.train_simple_model(x_data, y_data)

    test_input = 11.0
    prediction = helper.predict(model, test_input)
    print(f"Prediction for x={test_input:g}: {prediction:.2f}")
    print(f"Expected (2*11+1): {2 * test_input + 1:g}")

    return model


if __name__ == "__main__":
    linear_regression_example()
