import importlib
import warnings

from ._logging import get_logger

logger = get_logger(__name__)

_METHODS_TO_PATCH = {
    "_repr_html_": "repr_html",
    "_repr_latex_": "repr_latex",
    "_repr_markdown_": "repr_markdown",
}

# Stashed in place of classes that had no such method before patching.
_MISSING = object()


def _stashed_name(method_name):
    return f"_tablerepr_{method_name}"


def _make_method(function_name):
    def method(df):
        # imported here because the entry points read the configuration, which
        # imports this module
        import tablerepr

        return getattr(tablerepr, function_name)(df)

    method.__name__ = function_name
    return method


def _patch(cls, method_name):
    stashed_name = _stashed_name(method_name)
    if not hasattr(cls, stashed_name):
        setattr(cls, stashed_name, cls.__dict__.get(method_name, _MISSING))
    setattr(cls, method_name, _make_method(_METHODS_TO_PATCH[method_name]))


def _unpatch(cls, method_name):
    stashed_name = _stashed_name(method_name)
    if (original_method := cls.__dict__.get(stashed_name, None)) is None:
        return
    if original_method is _MISSING:
        delattr(cls, method_name)
    else:
        setattr(cls, method_name, original_method)
    delattr(cls, stashed_name)


def _change_display(transform, to_patch, warn_missing=False):
    for module_name, class_names in to_patch:
        try:
            mod = importlib.import_module(module_name)
        except ImportError:
            if warn_missing:
                warnings.warn(
                    f"{module_name!r} is not installed, its display is not patched."
                )
            continue
        for cls_name in class_names:
            cls = getattr(mod, cls_name)
            for method_name in _METHODS_TO_PATCH:
                transform(cls, method_name)
            logger.debug("%s %s.%s", transform.__name__, module_name, cls_name)


def _get_to_patch(pandas, polars):
    to_patch = []
    if pandas:
        to_patch.append(("pandas", ["DataFrame"]))
    if polars:
        to_patch.append(("polars", ["DataFrame"]))
    return to_patch


def _patch_display(pandas=True, polars=True, warn_missing=False):
    _change_display(
        _patch, _get_to_patch(pandas=pandas, polars=polars), warn_missing=warn_missing
    )


def _unpatch_display(pandas=True, polars=True):
    _change_display(_unpatch, _get_to_patch(pandas=pandas, polars=polars))


def patch_display(pandas=True, polars=True):
    """Replace the notebook display of dataframes with tablerepr's.

    The ``_repr_html_``, ``_repr_latex_`` and ``_repr_markdown_`` methods of
    ``pandas.DataFrame`` and ``polars.DataFrame`` are replaced by
    :func:`repr_html`, :func:`repr_latex` and :func:`repr_markdown`. The
    original methods are stashed and restored by :func:`unpatch_display`.

    Parameters
    ----------
    pandas : bool, default=True
        Whether to patch pandas DataFrames.
    polars : bool, default=True
        Whether to patch polars DataFrames. A warning is issued if polars is
        requested but not installed.

    See Also
    --------
    unpatch_display : Restore the original display.
    """
    _patch_display(pandas=pandas, polars=polars, warn_missing=True)


def unpatch_display(pandas=True, polars=True):
    """Undo the effect of :func:`patch_display`.

    Calling it when the display is not patched does nothing.

    Parameters
    ----------
    pandas : bool, default=True
        Whether to restore the display of pandas DataFrames.
    polars : bool, default=True
        Whether to restore the display of polars DataFrames.
    """
    _unpatch_display(pandas=pandas, polars=polars)
