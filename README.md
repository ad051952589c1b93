# rayengine

A small application framework built around a frame loop and a stack of
layers. Each frame, the application applies any queued layer changes, advances
its timer and calls `on_update(delta_time)` on every layer in order.

It has no dependencies outside the standard library.

## Modules

- **`rayengine.layer`**: `Layer`, the base class for a unit of per-frame work.
  Override `on_attach()`, `on_detach()` and `on_update(delta_time)`. Every layer
  has a `name` (default `"Layer"`). The base hooks keep track of `attached` and
  `last_delta_time`. Layers cannot be copied; `copy.copy` and `copy.deepcopy`
  raise `TypeError`.
- **`rayengine.layer_stack`**: `LayerStack` holds layers in one ordered
  sequence, regular layers first and overlays after them.
  - `push_layer(layer)` inserts at the end of the layer section.
  - `push_overlay(overlay)` appends at the very end.
  - Both attach the layer. If `on_attach` raises, the layer is taken out again
    and the exception propagates.
  - `remove_layer(layer)` detaches and drops a layer and returns whether it was
    found. `pop_layer(layer)` does the same but returns the layer, or `None`.
    Both take either the layer object or its name. With a name, the first match
    is used.
  - `clear()` detaches every layer and empties the stack.
  - Errors raised by `on_detach` are logged and do not stop the removal.
  - The stack supports `len()`, iteration and `in`. Membership is by identity.
- **`rayengine.application`**: `Application` owns a layer stack and a timer and
  runs the main loop.
  - `Application.get_instance()` returns one shared instance.
  - `initialize()` sets up logging and returns `True` on success.
  - `run()` loops until `stop()` is called, then shuts logging down and returns
    `True`.
  - `is_running()` reports whether the loop is active.
  - Exceptions raised by a layer's `on_update` are logged, and the loop carries
    on.
- **`rayengine.clock`**: `Timer` provides frame timing.
  - `tick()` advances one frame.
  - `delta_seconds` is the time between the last two ticks.
  - `elapsed_seconds` is the time from `reset()` to the last tick.
  - `elapsed_milliseconds()` is the time from `reset()` until now.
- **`rayengine.profiler`**: `Profiler` is a context manager that logs how long
  its block took. The `profile_function` decorator does the same for every
  call of a function.
- **`rayengine.log`**: sets up the engine logger (`core_logger()`, named
  `RAYENGINE`) and the client logger for application code (`client_logger()`,
  named `APP`).
- **`rayengine.sandbox`**: example layers:
  - `ExampleLayer` logs once per frame and sleeps for half a second.
  - `ExampleLayerDirect` pushes an `ExampleChildLayerDirect` onto the layer
    stack, pops it on the next frame, and then waits for input. The input
    function can be passed as `wait_for_input`; by default it reads one
    character from standard input.

## Example

```python
from rayengine.application import Application
from rayengine.layer import Layer
from rayengine.log import client_logger


class CountingLayer(Layer):
    def __init__(self):
        super().__init__("Counting")
        self.frames = 0

    def on_attach(self):
        client_logger().info("CountingLayer attached")

    def on_update(self, delta_time):
        self.frames += 1
        if self.frames == 100:
            Application.get_instance().stop()


app = Application.get_instance()
if app.initialize():
    app.push_layer(CountingLayer())
    app.run()
```

## Changing layers while the loop runs

Do not push or remove layers directly while the loop is iterating them;
`push_layer` and `push_overlay` are meant for the loop's own thread. From
inside a layer, or from another thread, use the queued methods instead. Queued
changes are applied on the loop's thread at the start of the next frame, and
an exception from one of them is logged.

```python
app.push_layer_async(CountingLayer())
app.push_overlay_async(CountingLayer())
app.remove_layer_async(some_layer)
app.pop_layer_async(some_layer, lambda popped: print(popped))
```

`pop_layer_async` passes the removed layer to the callback, or `None` if it
was not in the stack, so the layer can be reused. If it is given `None` as the
layer, it calls the callback with `None` straight away.

## Logging

`rayengine.log.init(pattern)` attaches a console handler to both loggers. The
handler writes to standard output, in colour when that is a terminal.

The default pattern is `"[%T] [%^%l%$] %v"`. These flags are understood:

| Flag | Meaning |
| --- | --- |
| `%T` | time as `HH:MM:SS` |
| `%H`, `%M`, `%S` | hours, minutes, seconds |
| `%e` | milliseconds |
| `%l` | level name |
| `%L` | short level name |
| `%n` | logger name |
| `%v` | message |
| `%^` ... `%$` | the coloured range |
| `%%` | a literal `%` |

A `TRACE` level sits below `DEBUG`. Loggers are set to `TRACE` normally, or to
`WARNING` when Python runs with `-O`.

Calling `init` a second time prints an error and keeps the existing setup.
`shutdown()` removes the handlers again.

## Profiling

```python
from rayengine.profiler import Profiler, profile_function

with Profiler("load assets"):
    ...

@profile_function
def build_level():
    ...
```

Each profiled block logs `[PROFILER] <name>: <ms> ms` at info level through
the core logger. `profile_function` has no effect when Python runs with `-O`.

While the application loop runs, each frame is profiled as `MainLoopTick`.

## What it does not do

The package has:

- no window, rendering, input or event handling;
- no command-line program.

A layer's `on_update` receives only the frame's delta time.