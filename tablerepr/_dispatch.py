"""
Allow specializing a function for different container libraries.

Many examples of functions using this decorator can be seen in the
``tablerepr._dataframe._common`` module.

When this decorator is applied to a function, the function becomes a generic
function for which we can register several implementations. The implementation
to use is chosen when the function is called, based on the type of the
**first argument**.

The decorator is a thin wrapper around the standard library's
``functools.singledispatch``. The difference is that we register specializations
by providing the library's name as a string, rather than providing an actual
type. This is necessary because some backends (ATM, only polars) are optional
dependencies and may not be installed. Therefore, it may not be possible to
import the type ``polars.DataFrame`` and use it to register an implementation
for a standard ``@singledispatch`` function.

Once ``dispatch`` has been applied to a function, it has a ``specialize``
attribute that can be used to register implementations.

>>> from tablerepr._dispatch import dispatch

>>> @dispatch
... def n_cells(df):
...     raise NotImplementedError()

>>> @n_cells.specialize("pandas")
... def _n_cells_pandas(df):
...     return df.size

>>> @n_cells.specialize("numpy")
... def _n_cells_numpy(df):
...     return df.size

>>> import pandas as pd
>>> n_cells(pd.DataFrame(dict(a=[3, 4])))
2

The tentative convention is to name the specialized implementations
``f"_{generic_function_name.lstrip('_')}_{library_name}"``.

Inside a specialized implementation, it is safe to import the corresponding
module or to call methods on the first argument that only exist for this
specific type. Outside such specialization, code **must not** directly access
methods of a container; it goes through ``tablerepr._dataframe`` instead.

It is also possible to register a specialization only for dataframes or only
for columns, with ``argument_type="DataFrame"`` or ``argument_type="Column"``.
numpy arrays are registered under the single ``"Matrix"`` type.

Single dispatch is done based on the type of the **first argument**, so generic
functions must take the container as their first parameter.
"""

from dataclasses import dataclass
from functools import singledispatch
from types import MappingProxyType, ModuleType
from typing import Any, Dict, Tuple


@dataclass
class DataFrameModuleInfo:
    name: str
    module: ModuleType
    types: Dict[str, Tuple[Any]]


def _load_dataframe_module_info(name):
    # if the module is not installed, import errors are propagated
    if name == "pandas":
        import pandas

        return DataFrameModuleInfo(
            **{
                "name": "pandas",
                "module": pandas,
                "types": MappingProxyType(
                    {
                        "DataFrame": (pandas.DataFrame,),
                        "Column": (pandas.Series,),
                    }
                ),
            }
        )
    if name == "polars":
        import polars

        return DataFrameModuleInfo(
            **{
                "name": "polars",
                "module": polars,
                "types": MappingProxyType(
                    {
                        "DataFrame": (polars.DataFrame,),
                        "LazyFrame": (polars.LazyFrame,),
                        "Column": (polars.Series,),
                    }
                ),
            }
        )
    if name == "numpy":
        import numpy

        return DataFrameModuleInfo(
            **{
                "name": "numpy",
                "module": numpy,
                "types": MappingProxyType({"Matrix": (numpy.ndarray,)}),
            }
        )
    raise KeyError(
        f"Unknown dataframe module: {name}. "
        "Available modules are ['pandas', 'polars' and 'numpy']."
    )


def raise_dispatch_unregistered_type(obj, kind="DataFrame"):
    raise TypeError(
        f"Expecting a pandas or polars {kind} or a 2D numpy array, "
        f"got an object of type {type(obj)}."
    )


def dispatch(function):
    """Make a generic function that performs dispatch on the first argument's type.

    The returned value is a generic function whose ``specialize`` attribute can
    be used to register implementations specialized for different container
    modules (pandas, polars, numpy). See this module's docstring for more
    details and examples.
    """
    dispatched = singledispatch(function)

    # ``dispatched.register`` requires a type, and some of the types we want to
    # register may not be importable (eg polars.DataFrame if polars is not
    # installed). ``specialize`` accepts strings instead and calls ``register``
    # with the appropriate types if they can be imported.

    def specialize(module_name, *, argument_type=None):
        try:
            module_info = _load_dataframe_module_info(module_name)
        except ImportError:
            # The implementations this decorator is applied to are written for
            # a module that is not installed: they are never registered.
            def decorator(specialized_impl):
                return specialized_impl

            return decorator

        if argument_type is None:
            argument_type = list(module_info.types.keys())
        elif isinstance(argument_type, str):
            argument_type = (argument_type,)

        def decorator(specialized_impl):
            types_to_register = set()
            for type_name in argument_type:
                types_to_register.update(module_info.types[type_name])
            for module_type in types_to_register:
                dispatched.register(module_type, specialized_impl)
            return specialized_impl

        return decorator

    dispatched.specialize = specialize

    return dispatched
