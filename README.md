# hostlink

Building blocks for controller firmware logic, usable from plain Python.

## What is in it

- **`hostlink.common`**
  - `ValueType` is an enum of element kinds: `CHAR`, `INT`, `FLOAT`, `DOUBLE`, `POINTER`, `STRING` and `ERROR`.
  - `ValueType.size()` returns the native size of one element in bytes. It returns 0 for `ERROR`.
  - `get_time_ms()` is a monotonic millisecond counter that wraps at 32 bits.
  - `delay_ms(ms)` sleeps for `ms` milliseconds.
- **`hostlink.containers.array.Array`**
  - A fixed-size sequence of one `ValueType`. Slots start as `None`.
  - Offers `front()`, `back()`, `fill()`, `swap()`, indexing with bounds checks, and forward and reverse iteration.
- **`hostlink.containers.vector.Vector`**
  - A growable sequence that tracks its capacity separately from its length.
  - Single-element pushes double the capacity. Range appends grow it to exactly what is needed.
  - Offers `reserve()`, `shrink_to_fit()`, `insert()`, `insert_range()`, `erase(start, stop)`, `push_back()`, `append_range()`, `pop_back()`, `resize()`, `clear()` and `swap()`.
- **`hostlink.containers.linked_list`**
  - `LinkedList` is a doubly linked list.
  - `ListCursor` positions come from `begin()`, `end()`, `rbegin()` and `rend()`.
  - Cursors support `next()`, `prev()`, `advance()`, `value()`, and `+` / `-`.
  - The list offers `insert`, `insert_range`, `erase`, push and pop at either end, `append_range`, `prepend_range`, `resize`, `swap`, `reverse`, `merge`, `splice`, `remove`, `remove_if`, `unique` and a stable `sort(compare)`.
- **`hostlink.led.Led`**
  - On, off, toggle and state queries.
  - `blink(period)` toggles the LED on a background thread. `stop_blink()` ends it and leaves the LED off.
  - Pin writes go through an optional `write_level(pin, level)` callable.
  - The LED can be used as a context manager.
- **`hostlink.buttons.Button`**
  - A debounced button. The defaults are a 35 ms debounce and a 1000 ms held threshold, active low.
  - Callbacks run on release: `on_press()` for short presses and `on_pressed_for()` for long presses.
  - Offers `was_pressed()`, `was_released()`, `was_pressed_for()` and `was_released_for()`.
  - `wait_for_press()` and `wait_for_release()` block, with an optional timeout. They poll, or after `enable_interrupt()` they wait on events set by `read()`.
  - Levels come from `read_level(pin)`. Time comes from `clock()`.
- **`hostlink.joystick`**
  - `Joystick` turns raw axis readings into values in [-1, 1], with a deadband (0.05 by default).
  - `JoystickConfig` holds the calibration limits and resting points.
  - `ConfigStore` keeps named calibrations in a JSON file. `Joystick` loads the one named `js_cfg`. If none is found it falls back to the defaults and reports `is_calibrated()` as False.

## Install

```
pip install .
```

## Examples

```python
from hostlink.common import ValueType
from hostlink.containers.vector import Vector
from hostlink.containers.linked_list import LinkedList

v = Vector(ValueType.INT)
v.append_range([3, 1, 2])
v.push_back(5)
print(list(v), v.capacity())  # [3, 1, 2, 5] 6

lst = LinkedList(ValueType.INT)
lst.append_range([4, 1, 1, 3])
lst.unique()
lst.sort(lambda a, b: a - b)
print(list(lst))  # [1, 3, 4]
```

```python
from hostlink.buttons import Button

level = {"pin": 1}
now = {"ms": 0}
button = Button(6, lambda pin: level["pin"], clock=lambda: now["ms"])
button.on_pressed_for(lambda: print("long press"))

level["pin"] = 0; now["ms"] = 100; button.read()   # pressed (active low)
level["pin"] = 1; now["ms"] = 1200; button.read()  # released after 1100 ms -> "long press"
```

```python
from hostlink.joystick import ConfigStore, Joystick, JoystickConfig

store = ConfigStore("joystick.json")
store.save("js_cfg", JoystickConfig())
js = Joystick(lambda: 3903, lambda: 1651, store)
js.read()
print(js.x(), js.y(), js.is_calibrated())  # 1.0 0.0 True
```

## What it does not do

- It does not touch hardware. Pin levels, ADC readings and time reach it only through the callables you pass in.
- It has no command-line program.
- Its containers are the array, vector and linked list described above. There is no heap-ordered priority queue, FIFO queue or stack type.

## Tests

```
pip install .[test]
pytest
```