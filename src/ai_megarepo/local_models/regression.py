"""
Local linear regression with TensorFlow / Keras.

A single-input, single-output dense model trained with plain SGD on mean
squared error. Models are returned to the caller as ``tf.keras.Sequential``
handles; the helper itself only remembers whether the backend has been set
up.

Usage:
    helper = LinearRegressionHelper(settings)
    helper.initialize()
    model = helper.train_simple_model([1, 2, 3, 4], [2, 4, 6, 8])
    helper.predict(model, 5)  # ~10.0
"""

import threading
from pathlib import Path
from typing import Optional, Sequence, Union

import tensorflow as tf

from ..config import Settings
from ..errors import ValidationError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

EPOCHS = 100
OPTIMIZER = "sgd"
LOSS = "mean_squared_error"

FILE_SCHEME = "file://"
MODEL_SUFFIXES = (".keras", ".h5")
DEFAULT_MODEL_SUFFIX = ".keras"

PathLike = Union[str, Path]


def resolve_model_path(path: PathLike) -> Path:
    """
    Map a caller-supplied location to the file Keras reads and writes.

    A ``file://`` prefix is stripped. Paths without a Keras suffix get
    ``.keras`` appended, so save and load always agree on the file.
    """
    raw = str(path)
    if raw.startswith(FILE_SCHEME):
        raw = raw[len(FILE_SCHEME):]
    resolved = Path(raw)
    if resolved.suffix not in MODEL_SUFFIXES:
        resolved = resolved.with_name(resolved.name + DEFAULT_MODEL_SUFFIX)
    return resolved


class LinearRegressionHelper:
    """Builds, trains, runs and persists a one-unit linear model."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: Application settings; ``tensorflow_backend`` selects
                      the execution backend. Defaults to CPU.
        """
        self.backend = (settings or Settings()).tensorflow_backend
        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Set up the execution backend once; later calls do nothing."""
        with self._init_lock:
            if self._initialized:
                return
            self._select_backend()
            self._initialized = True
        logger.info("TensorFlow ready (backend=%s)", self.backend)

    def _select_backend(self) -> None:
        if self.backend.lower() != "cpu":
            return
        try:
            tf.config.set_visible_devices([], "GPU")
        except RuntimeError as e:
            # Devices can't be changed once the runtime has initialized them
            logger.warning("Could not restrict TensorFlow to CPU: %s", e)

    def create_model(self) -> tf.keras.Sequential:
        """Build an untrained Dense(1) model compiled with SGD and MSE."""
        model = tf.keras.Sequential(
            [
                tf.keras.Input(shape=(1,)),
                tf.keras.layers.Dense(units=1),
            ]
        )
        model.compile(optimizer=OPTIMIZER, loss=LOSS)
        return model

    def train_simple_model(
        self,
        x_values: Sequence[float],
        y_values: Sequence[float],
    ) -> tf.keras.Sequential:
        """
        Fit a fresh model to paired samples.

        Args:
            x_values: Inputs
            y_values: Targets, same length as ``x_values``

        Returns:
            The fitted model

        Raises:
            ValidationError: If the sequences are empty or differ in length
        """
        if len(x_values) != len(y_values):
            raise ValidationError(
                f"x_values and y_values must have the same length "
                f"({len(x_values)} != {len(y_values)})"
            )
        if len(x_values) == 0:
            raise ValidationError("Training data must not be empty")

        model = self.create_model()

        xs = tf.constant(x_values, dtype=tf.float32, shape=(len(x_values), 1))
        ys = tf.constant(y_values, dtype=tf.float32, shape=(len(y_values), 1))
        model.fit(xs, ys, epochs=EPOCHS, verbose=0)

        # Release training tensors before handing the model back
        del xs, ys

        logger.debug("Trained linear model on %d samples", len(x_values))
        return model

    def predict(self, model: tf.keras.Model, value: float) -> float:
        """Run one forward pass on a scalar input and return a float."""
        inputs = tf.constant([[value]], dtype=tf.float32)
        outputs = model(inputs, training=False)
        result = float(outputs.numpy()[0][0])
        del inputs, outputs
        return result

    def save_model(self, model: tf.keras.Model, path: PathLike) -> Path:
        """
        Save architecture and weights to ``path``.

        Returns:
            The file actually written (see ``resolve_model_path``)
        """
        target = resolve_model_path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        model.save(str(target))
        logger.info("Saved model to %s", target)
        return target

    def load_model(self, path: PathLike) -> tf.keras.Model:
        """Load a model previously written by ``save_model``."""
        source = resolve_model_path(path)
        model = tf.keras.models.load_model(str(source))
        logger.info("Loaded model from %s", source)
        return model
