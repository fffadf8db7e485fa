"""Tests for promptree.prompt templates, messages and prompts."""

from __future__ import annotations

import re

import pytest

from promptree.prompt import (
    Message,
    MissingVariablesError,
    Prompt,
    PromptTemplate,
    SystemPromptTemplate,
)
from promptree.template import TemplateFormatError


class TestMessage:
    def test_construction(self):
        msg = Message(role="user", content="Hello")
        assert msg.role == "user"
        assert msg.content == "Hello"

    def test_role_helpers(self):
        assert Message.system("s").role == "system"
        assert Message.user("u").role == "user"
        assert Message.assistant("a").role == "assistant"


class TestPrompt:
    def test_from_text(self):
        prompt = Prompt.from_text("hi")
        assert prompt.instructions == [Message(role="user", content="hi")]

    def test_contents_concatenates(self):
        prompt = Prompt([Message.system("You are terse. "), Message.user("Hi")])
        assert prompt.contents == "You are terse. Hi"

    def test_empty(self):
        assert Prompt().contents == ""


class TestPromptTemplate:
    def test_missing_variable_then_added(self):
        pt = PromptTemplate("Hello '{firstName}' '{lastName}' from Unix")
        model = {"firstName": "Nick"}

        expected = (
            "All template variables were not replaced. "
            "Missing variable names are [lastName]"
        )
        with pytest.raises(MissingVariablesError, match=re.escape(expected)) as exc_info:
            pt.render(model)
        assert exc_info.value.missing == ("lastName",)

        pt.add("lastName", "Park")
        assert pt.render(model) == "Hello 'Nick' 'Park' from Unix"
        # render again
        assert pt.render(model) == "Hello 'Nick' 'Park' from Unix"

    def test_missing_names_sorted(self):
        pt = PromptTemplate("{b} {a} {c}")
        with pytest.raises(MissingVariablesError) as exc_info:
            pt.render({"c": 1})
        assert exc_info.value.missing == ("a", "b")
        assert str(exc_info.value).endswith("[a, b]")

    def test_missing_is_value_error(self):
        with pytest.raises(ValueError):
            PromptTemplate("{x}").render()

    def test_input_variables(self):
        pt = PromptTemplate("This {bar} is a {foo} test {foo}.")
        assert pt.input_variables == frozenset({"foo", "bar"})

    def test_bad_template_rejected_on_construction(self):
        with pytest.raises(TemplateFormatError, match="The template string is not valid"):
            PromptTemplate("This is a {foo test")

    def test_model_overrides_template_variables(self):
        pt = PromptTemplate("{greeting}, {name}", variables={"greeting": "Hi", "name": "A"})
        assert pt.render({"name": "B"}) == "Hi, B"
        assert pt.render() == "Hi, A"

    def test_render_does_not_keep_model_values(self):
        pt = PromptTemplate("{name}")
        assert pt.render({"name": "once"}) == "once"
        with pytest.raises(MissingVariablesError):
            pt.render()

    def test_extra_values_ignored(self):
        assert PromptTemplate("{a}").render({"a": 1, "unused": 2}) == "1"

    def test_variables_property_is_a_copy(self):
        pt = PromptTemplate("{a}", variables={"a": 1})
        pt.variables["a"] = 2
        assert pt.render() == "1"

    def test_escapes_and_values(self):
        pt = PromptTemplate('Reply as {{"answer": "{kind}"}} for {items}')
        assert pt.render({"kind": "text", "items": ["x", "y"]}) == (
            "Reply as {\"answer\": \"text\"} for ['x', 'y']"
        )

    def test_create_prompt(self):
        pt = PromptTemplate("{text}")
        prompt = pt.create({"text": "I love programming"})
        assert len(prompt.instructions) == 1
        assert prompt.instructions[0].role == "user"
        assert prompt.contents == "I love programming"

    def test_create_message(self):
        msg = PromptTemplate("Hi {who}").create_message({"who": "you"})
        assert msg == Message(role="user", content="Hi you")

    def test_repr(self):
        assert repr(PromptTemplate("{a}")) == "PromptTemplate('{a}')"


class TestSystemPromptTemplate:
    def test_system_role(self):
        pt = SystemPromptTemplate(
            "You are a helpful assistant that translates "
            "{input_language} to {output_language}."
        )
        prompt = pt.create({"input_language": "English", "output_language": "French"})
        assert prompt.instructions[0].role == "system"
        assert prompt.contents == (
            "You are a helpful assistant that translates English to French."
        )

    def test_is_prompt_template(self):
        assert isinstance(SystemPromptTemplate("x"), PromptTemplate)
