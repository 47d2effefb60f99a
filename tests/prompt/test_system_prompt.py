"""Tests for the system prompt generator."""

import unittest

from fixtures.specs import SAMPLE_SPEC_TEXT
from specagent.prompt.generator import PromptGenerator


class TestPromptGenerator(unittest.TestCase):

    def setUp(self):
        self.generator = PromptGenerator(
            api_name="Open-Meteo", spec_text=SAMPLE_SPEC_TEXT
        )

    def test_embeds_spec_verbatim(self):
        prompt = self.generator.generate_system_prompt()
        self.assertIn(
            "<openapi_specification>\n" + SAMPLE_SPEC_TEXT.strip() + "\n</openapi_specification>",
            prompt,
        )

    def test_mentions_api_and_tool(self):
        prompt = self.generator.generate_system_prompt()
        self.assertIn("expertise in the Open-Meteo API", prompt)
        self.assertIn("## How to use the 'openapi' tool:", prompt)

    def test_example_call_uses_tool_argument_names(self):
        prompt = self.generator.generate_system_prompt()
        self.assertIn('"base_url": "https://api.example.com"', prompt)
        self.assertIn('"query_params": {', prompt)
        self.assertNotIn("{{", prompt)

    def test_custom_tool_name(self):
        generator = PromptGenerator(
            api_name="Petstore", spec_text="openapi: 3.0.0", tool_name="petstore_api"
        )
        prompt = generator.generate_system_prompt()
        self.assertIn("using the 'petstore_api' tool", prompt)

    def test_description_section(self):
        generator = PromptGenerator(
            api_name="Petstore",
            spec_text="openapi: 3.0.0",
            api_description="  Manage pets in the store.  ",
        )
        prompt = generator.generate_system_prompt()
        self.assertIn("## About the API\n\nManage pets in the store.\n", prompt)

    def test_no_description_section_by_default(self):
        self.assertNotIn("## About the API", self.generator.generate_system_prompt())

    def test_spec_with_braces(self):
        spec = '{"openapi": "3.0.0", "paths": {"/pets/{petId}": {}}}'
        prompt = PromptGenerator(api_name="Pets", spec_text=spec).generate_system_prompt()
        self.assertIn(spec, prompt)

    def test_custom_template(self):
        generator = PromptGenerator(
            api_name="Pets",
            spec_text="spec",
            template="{api_name}|{tool_name}|{spec_text}|{api_description}",
        )
        self.assertEqual(generator.generate_system_prompt(), "Pets|openapi|spec|")


if __name__ == "__main__":
    unittest.main()
