import numbers
import os
import threading
from collections.abc import Mapping
from contextlib import contextmanager
from typing import NamedTuple

from . import _patching


class ColSpec(NamedTuple):
    """Column alignment of the LaTeX ``tabular`` environment.

    Parameters
    ----------
    col : str, default="l"
        Token repeated once per displayed data column.
    row_head : str, default="r|"
        Token for the column holding the row names, used only when the source
        has row names.
    end : str, default=""
        Token appended after the data columns.

    Examples
    --------
    >>> from tablerepr import ColSpec
    >>> ColSpec()
    ColSpec(col='l', row_head='r|', end='')
    >>> ColSpec(col="c").preamble(3, has_row_names=True)
    'r|ccc'
    """

    col: str = "l"
    row_head: str = "r|"
    end: str = ""

    def preamble(self, n_columns, has_row_names):
        cols = self.col * n_columns + self.end
        if has_row_names:
            cols = self.row_head + cols
        return cols


def _parse_env_bool(env_variable_name, default):
    value = os.getenv(env_variable_name, default)
    if isinstance(value, bool):
        return value
    if value == "True":
        return True
    elif value == "False":
        return False
    else:
        raise ValueError(
            f"{env_variable_name!r} must be either 'True' or 'False', got {value}."
        )


_global_config = {
    "max_rows": int(os.environ.get("TABLEREPR_MAX_ROWS", 60)),
    "max_cols": int(os.environ.get("TABLEREPR_MAX_COLS", 20)),
    "float_precision": int(os.environ.get("TABLEREPR_FLOAT_PRECISION", 7)),
    "latex_colspec": ColSpec(),
    "use_repr": _parse_env_bool("TABLEREPR_USE_REPR", False),
}
_threadlocal = threading.local()


def _get_threadlocal_config():
    """Return a thread-local copy of the global configuration.

    This is used to ensure that each thread has its own configuration
    without affecting the global configuration.
    """
    if not hasattr(_threadlocal, "global_config"):
        _threadlocal.global_config = _global_config.copy()
    return _threadlocal.global_config


def get_config():
    """Retrieve current values for configuration set by :func:`set_config`.

    Returns
    -------
    config : dict
        Keys are parameter names that can be passed to :func:`set_config`.

    See Also
    --------
    config_context : Context manager for global tablerepr configuration.
    set_config : Set global tablerepr configuration.

    Examples
    --------
    >>> import tablerepr
    >>> config = tablerepr.get_config()
    >>> config.keys()
    dict_keys([...])
    """
    return _get_threadlocal_config().copy()


def check_display_limit(name, value):
    """Raise a ValueError unless ``value`` is an integer >= 2.

    At least one row (column) must be kept on each side of the ellipsis.
    """
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Integral)
        or value < 2
    ):
        raise ValueError(f"{name!r} must be an integer >= 2, got {value!r}.")


def check_colspec(colspec):
    """Return ``colspec`` as a ``ColSpec``.

    Mappings with the keys 'col', 'row_head' and 'end' are accepted too.
    """
    if isinstance(colspec, ColSpec):
        return colspec
    if isinstance(colspec, Mapping):
        unknown = set(colspec) - set(ColSpec._fields)
        if not unknown and all(isinstance(v, str) for v in colspec.values()):
            return ColSpec(**colspec)
    raise ValueError(
        "'latex_colspec' must be a ColSpec or a mapping with string values for "
        f"the keys {list(ColSpec._fields)!r}, got {colspec!r}."
    )


def _apply_external_patches(config):
    if config["use_repr"]:
        _patching._patch_display()
    else:
        # No-op if the display hasn't been previously patched
        _patching._unpatch_display()


def set_config(
    max_rows=None,
    max_cols=None,
    float_precision=None,
    latex_colspec=None,
    use_repr=None,
):
    """Set global tablerepr configuration.

    Parameters
    ----------
    max_rows : int, default=None
        Maximum number of data rows shown before rows are elided with a row of
        "⋮". Must be >= 2. Default is 60.

        This configuration can also be set with the ``TABLEREPR_MAX_ROWS``
        environment variable.

    max_cols : int, default=None
        Maximum number of data columns shown before columns are elided with a
        column of "⋯". Must be >= 2. Default is 20.

        This configuration can also be set with the ``TABLEREPR_MAX_COLS``
        environment variable.

    float_precision : int, default=None
        Number of significant digits shown when formatting floats. Default is 7.

        This configuration can also be set with the
        ``TABLEREPR_FLOAT_PRECISION`` environment variable.

    latex_colspec : ColSpec or dict, default=None
        Column alignment of the LaTeX tabular environment. Default is
        ``ColSpec(col="l", row_head="r|", end="")``.

    use_repr : bool, default=None
        Whether pandas and polars DataFrames use the tablerepr HTML, LaTeX and
        Markdown representations in notebooks. Default is ``False``.

        This configuration can also be set with the ``TABLEREPR_USE_REPR``
        environment variable.

    See Also
    --------
    get_config : Retrieve current values for global configuration.
    config_context : Context manager for global tablerepr configuration.

    Examples
    --------
    >>> from tablerepr import set_config
    >>> set_config(max_rows=10)  # doctest: +SKIP
    """
    local_config = _get_threadlocal_config()
    if max_rows is not None:
        check_display_limit("max_rows", max_rows)
        local_config["max_rows"] = max_rows

    if max_cols is not None:
        check_display_limit("max_cols", max_cols)
        local_config["max_cols"] = max_cols

    if float_precision is not None:
        if not isinstance(float_precision, numbers.Integral) or float_precision <= 0:
            raise ValueError(
                f"'float_precision' must be a positive integer, got {float_precision!r}"
            )
        local_config["float_precision"] = float_precision

    if latex_colspec is not None:
        local_config["latex_colspec"] = check_colspec(latex_colspec)

    if use_repr is not None:
        if not isinstance(use_repr, bool):
            raise ValueError(f"'use_repr' must be a boolean, got {use_repr!r}.")
        local_config["use_repr"] = use_repr

    _apply_external_patches(local_config)


@contextmanager
def config_context(
    *,
    max_rows=None,
    max_cols=None,
    float_precision=None,
    latex_colspec=None,
    use_repr=None,
):
    """Context manager for global tablerepr configuration.

    Parameters
    ----------
    max_rows : int, default=None
        Maximum number of data rows shown before rows are elided. Default is 60.

    max_cols : int, default=None
        Maximum number of data columns shown before columns are elided.
        Default is 20.

    float_precision : int, default=None
        Number of significant digits shown when formatting floats. Default is 7.

    latex_colspec : ColSpec or dict, default=None
        Column alignment of the LaTeX tabular environment.

    use_repr : bool, default=None
        Whether pandas and polars DataFrames use the tablerepr representations
        in notebooks. Default is ``False``.

    Yields
    ------
    None.

    See Also
    --------
    get_config : Retrieve current values for global configuration.
    set_config : Set global tablerepr configuration.

    Examples
    --------
    >>> import numpy as np
    >>> import tablerepr
    >>> with tablerepr.config_context(max_rows=2):
    ...     tablerepr.truncate(np.arange(6).reshape(3, 2)).shape
    (3, 2)
    """
    original_config = get_config()
    set_config(
        max_rows=max_rows,
        max_cols=max_cols,
        float_precision=float_precision,
        latex_colspec=latex_colspec,
        use_repr=use_repr,
    )

    try:
        yield
    finally:
        set_config(**original_config)


# Apply patching set by environment variables. Without it, setting
# TABLEREPR_USE_REPR would not have an effect.
_apply_external_patches(get_config())
