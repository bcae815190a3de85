"""
PyYAML adapter for syntax validation.

Wraps ``yaml.SafeLoader`` behind a single call that either returns the
decoded value or raises ParseFailure. Two additions on top of PyYAML:

- Duplicate mapping keys emit a DeprecationWarning (PyYAML silently keeps
  the last value).
- Deprecation warnings emitted during a parse are promoted to errors and
  reported at the line of the node being constructed.

Custom tags (``!env HOME``) are rejected by the safe loader unless the
caller allows them, in which case they decode to TaggedValue.

Example usage:
    from yaml_lint.parser import ParserAdapter

    adapter = ParserAdapter()
    adapter.validate_document("a: 1")                       # {'a': 1}
    adapter.validate_document("x: !env HOME", allow_custom_tags=True)
"""

import logging
import warnings
from typing import Any, Dict, Optional, Type

import yaml

from .errors import DeprecationPromotedError, ParseFailure
from .models import TaggedValue

logger = logging.getLogger(__name__)

MERGE_TAG = "tag:yaml.org,2002:merge"


class LintLoader(yaml.SafeLoader):
    """
    Safe loader that tracks the node being constructed and flags duplicate keys.

    ``current_mark`` is the start mark of the most recently constructed node;
    it localizes errors raised after composition, where the reader is
    already at the end of the document.
    """

    def __init__(self, stream):
        self.current_mark: Optional[yaml.Mark] = None
        super().__init__(stream)

    def construct_object(self, node, deep=False):
        self.current_mark = node.start_mark
        return super().construct_object(node, deep=deep)

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self._warn_duplicate_keys(node)
        return super().construct_mapping(node, deep=deep)

    def _warn_duplicate_keys(self, node: yaml.MappingNode) -> None:
        # Checked before merge keys are flattened: keys pulled in through
        # ``<<`` may legitimately be overridden.
        seen = set()
        for key_node, _ in node.value:
            if key_node.tag == MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=True)
            try:
                duplicate = key in seen
                seen.add(key)
            except TypeError:
                # Unhashable key; SafeConstructor reports it.
                continue
            if duplicate:
                self.current_mark = key_node.start_mark
                warnings.warn(
                    f'Duplicate key "{key}" detected whilst parsing YAML. '
                    "Silent overriding of mappings is deprecated.",
                    DeprecationWarning,
                    stacklevel=2,
                )


def _construct_tagged(loader: LintLoader, tag: str, node: yaml.Node) -> TaggedValue:
    """Decode a node with an unknown tag into a TaggedValue."""
    if isinstance(node, yaml.ScalarNode):
        value: Any = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)
    return TaggedValue(tag=tag, value=value)


class TaggedLintLoader(LintLoader):
    """LintLoader that accepts application-defined tags."""


# A None prefix catches every tag without a registered constructor.
TaggedLintLoader.add_multi_constructor(None, _construct_tagged)


def _line_from_mark(mark: Optional[yaml.Mark]) -> Optional[int]:
    """Convert a 0-based PyYAML mark to a 1-based line number."""
    if mark is None:
        return None
    return mark.line + 1


class ParserAdapter:
    """
    Parses YAML text, translating every failure into ParseFailure.

    PyYAML loaders are bound to a single stream, so the reusable part is the
    loader class: it is resolved lazily per ``allow_custom_tags`` value and
    cached on the adapter. Instances are safe to reuse sequentially; when
    validating in parallel, give each worker its own adapter.
    """

    def __init__(self):
        self._loader_classes: Dict[bool, Type[LintLoader]] = {}

    def loader_class(self, allow_custom_tags: bool = False) -> Type[LintLoader]:
        """Get the loader class for the given tag policy."""
        if allow_custom_tags not in self._loader_classes:
            self._loader_classes[allow_custom_tags] = (
                TaggedLintLoader if allow_custom_tags else LintLoader
            )
        return self._loader_classes[allow_custom_tags]

    def validate_document(
        self,
        content: str,
        allow_custom_tags: bool = False,
        name: Optional[str] = None,
    ) -> Any:
        """
        Parse a YAML stream.

        Args:
            content: Full text to parse (may be empty)
            allow_custom_tags: Accept application-defined tags instead of
                rejecting them as unknown
            name: Source name used in parser messages (defaults to PyYAML's
                "<unicode string>")

        Returns:
            None for an empty stream, the decoded value for a single
            document, or a list of values for a multi-document stream

        Raises:
            ParseFailure: On any syntax or construction error
            DeprecationPromotedError: If a deprecation warning was emitted
        """
        loader_cls = self.loader_class(allow_custom_tags)

        try:
            loader = loader_cls(content)
        except yaml.YAMLError as e:
            # Reader errors (non-printable characters) fire on construction.
            raise ParseFailure(str(e)) from e

        if name is not None:
            loader.name = name

        try:
            with warnings.catch_warnings():
                warnings.simplefilter("error", DeprecationWarning)
                documents = []
                while loader.check_data():
                    documents.append(loader.get_data())
        except DeprecationWarning as w:
            mark = loader.current_mark or loader.get_mark()
            raise DeprecationPromotedError(f"{w}\n{mark}", _line_from_mark(mark)) from w
        except yaml.MarkedYAMLError as e:
            mark = e.problem_mark or e.context_mark
            raise ParseFailure(str(e), _line_from_mark(mark)) from e
        except yaml.YAMLError as e:
            raise ParseFailure(str(e)) from e
        except RecursionError as e:
            # Raised by the composer as well as by constructors.
            mark = loader.current_mark or loader.get_mark()
            raise ParseFailure(
                f"document nesting is too deep to parse\n{mark}", _line_from_mark(mark)
            ) from e
        except (ValueError, OverflowError, TypeError, KeyError, AttributeError) as e:
            # Constructors fail outside YAMLError on explicitly tagged or
            # out-of-range scalars, e.g. ``!!bool maybe`` or month 13.
            mark = loader.current_mark
            message = f"could not construct value ({type(e).__name__}: {e})"
            raise ParseFailure(f"{message}\n{mark}" if mark else message, _line_from_mark(mark)) from e
        finally:
            loader.dispose()

        logger.debug("Parsed %d document(s) from %s", len(documents), name or "<string>")

        if not documents:
            return None
        if len(documents) == 1:
            return documents[0]
        return documents
