# domainprims

This package provides small building blocks for domain-driven code:

- validated value objects
- structured errors for the use-case layer
- checks on authorization settings
- step-by-step builders for dataclasses

It depends only on the standard library.

## Installation

```
pip install domainprims
```

To install what the test suite needs and run it:

```
pip install "domainprims[test]"
pytest
```

## Errors (`domainprims.errors`)

The module defines two error families.

### DomainError

`DomainError` has a `kind` (a `DomainErrorKind`) and a `message`. The
primitives raise it when validation fails. Create one with any of these
constructors:

- `DomainError.validation`
- `DomainError.unexpected`
- `DomainError.domain_rule`
- `DomainError.repository`

### UseCaseError

`UseCaseError` has three attributes: `kind` (a `UseCaseErrorKind`), an
integer `error_code` and a `message`.

- `str()` of the error returns its message.
- `str()` of a kind returns the kind in lower case, with spaces between words,
  for example `validation`, `domain rule` or `not found`.

Constructors:

| Constructor | Kind | Code (`UseCaseErrorCode`) |
|---|---|---|
| `unexpected` | `UNEXPECTED` | 0 |
| `validation` | `VALIDATION` | 1 |
| `domain_rule` | `DOMAIN_RULE` | 2 |
| `repository` | `REPOSITORY` | 3 |
| `not_found` | `NOT_FOUND` | 4 |
| `unauthorized` | `UNAUTHORIZED` | 5 |

To build an error with a code of your own, call
`UseCaseError(kind, error_code, message)` directly. The module defines two
such codes, `ERR_SAME_EMAIL_ADDRESS_IS_REGISTERED` (1000) and
`ERR_SPECIFY_FIXED_OR_MOBILE_NUMBER` (1001).

`UseCaseError.from_domain_error` converts a `DomainError` into the
`UseCaseError` of the same category.

```python
from domainprims.errors import DomainError, UseCaseError

try:
    raise DomainError.validation("bad input")
except DomainError as exc:
    err = UseCaseError.from_domain_error(exc)
    print(err.kind, err.error_code, err)   # validation 1 bad input
```

## Primitives (`domainprims.primitives`)

You configure a primitive by subclassing it and passing class keywords. Each
primitive exposes its value as the read-only `value` property. Two
primitives are equal when they are of the same class and hold the same
value. Primitives are hashable.

### StringPrimitive

The class keywords are:

- `name` (required)
- `message` (required)
- `min_length` (optional)
- `max_length` (optional)
- `pattern` (optional)

The constructor works in this order:

1. It converts the input to text and trims it.
2. Blank input raises `DomainError` with the text `<name>は空文字を指定できません。`.
3. If a length or pattern check fails, it raises `DomainError` carrying
   `message`.

The pattern is matched with `re.search`.

### IntegerPrimitive

The class keywords are:

- `name` (required)
- `min_value` and `max_value`

At least one of the two bounds must be given, otherwise the subclass
definition raises `TypeError`. Both bounds are inclusive.

The constructor accepts integers only. Passing a `bool` or any non-integer
raises `TypeError`. A value outside the range raises `DomainError`.

### primitive_display

`primitive_display` is a class decorator that makes `str(obj)` return
`str(obj.value)`. The decorated class must declare a `value` field.

```python
from domainprims.primitives import StringPrimitive, IntegerPrimitive

class Nickname(StringPrimitive, name="Nickname",
               message="Use 3 to 20 characters.",
               min_length=3, max_length=20):
    pass

class Amount(IntegerPrimitive, name="Amount", min_value=0, max_value=20):
    pass

Nickname("  alice ").value   # "alice"
Amount(25)                   # raises DomainError
```

## Optional string primitives (`domainprims.optional`)

`OptionalStringPrimitive` holds either a string or nothing.

The class keywords are:

- `name` (required)
- `regex`
- `min_length`
- `max_length`

Construction behaves as follows:

- `None`, empty input and blank input all give the empty state.
- Any other string is trimmed and then checked. Lengths are counted in UTF-8
  bytes. The regular expression is matched with `re.search`.
- Input that fails a check raises `DomainError`.
- Passing anything other than a string or `None` raises `TypeError`.

The class provides these helpers:

- `try_from_str`
- `none()`
- `value()`, which returns the string or `None`
- `is_some()`
- `is_none()`

`str()` of an empty primitive returns `"None"`.

```python
from domainprims.optional import OptionalStringPrimitive

class Remarks(OptionalStringPrimitive, name="Remarks", max_length=400):
    pass

Remarks("   ").is_none()                  # True
Remarks.try_from_str(" note ").value()   # "note"
Remarks.none().is_some()                 # False
```

## Settings (`domainprims.settings`)

The module defines two dataclasses. Neither one includes its secret in its
`repr`.

`PasswordSettings` holds:

- `pepper`
- `hash_memory`
- `hash_iterations`
- `hash_parallelism`

`AuthorizationSettings` holds:

- `attempting_seconds`
- `number_of_failures`
- `jwt_token_secret`
- `access_token_seconds`
- `refresh_token_seconds`

`AuthorizationSettings.validate()` raises an unexpected `UseCaseError`, and
logs it, unless `refresh_token_seconds` is greater than
`access_token_seconds`.

## Builders (`domainprims.builder`)

`builder` is a class decorator for dataclasses. You can apply it bare, or
with `validation="method_name"`. It adds a `builder()` class method that
returns a `Builder`. You can also create one directly with
`Builder(SomeDataclass)`.

### Setters

Every field has a chainable setter with the same name as the field.

For a `list[T]` field declared with `builder_field(each="item")`, the setter
is named `item` instead, and each call appends one item.

### Fields you do not set

If a field is not set before `build()`, the outcome depends on its type:

- `Optional[T]` or `T | None`: the field becomes `None`.
- A list field: the field starts empty.
- A field with a dataclass default: the field keeps that default.
- Any other field: `build()` raises `BuildError("<field> is not provided")`.

### Building

`build()` hands the collected values to the new instance and leaves the
builder empty. If you gave a `validation` method, it is then called on the
instance, and anything it raises reaches the caller.

```python
from dataclasses import dataclass
from typing import Optional
from domainprims.builder import builder, builder_field

@builder
@dataclass
class Command:
    executable: str
    args: list[str] = builder_field(each="arg")
    current_dir: Optional[str] = None

command = (
    Command.builder()
    .executable("cargo")
    .arg("build")
    .arg("--release")
    .current_dir("/home")
    .build()
)
```

## What this package does not do

This package is a library only. It does not include any of the following:

- an HTTP server or routes
- database or cache access
- logging setup
- password hashing
- token issuing

The settings classes hold values and check them. They do not read
configuration files or environment variables.