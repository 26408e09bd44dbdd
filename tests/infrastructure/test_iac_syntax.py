"""
Test suite for package syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. All components are importable and inherit from pulumi.ComponentResource
3. Output dataclasses are properly defined
4. Program entry point and modules are documented
"""

import ast
from dataclasses import is_dataclass
from pathlib import Path

import pulumi
import pytest

PACKAGE_DIR = Path(__file__).parent.parent.parent / "apache_fleet"


class TestSyntaxValidation:
    """Validate Python syntax in all package modules."""

    def test_all_files_have_valid_syntax(self, python_files_in_package):
        """All Python files should parse without syntax errors."""
        errors = []

        for py_file in python_files_in_package:
            try:
                ast.parse(py_file.read_text())
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)

    def test_component_packages_have_init(self):
        """All component packages should have __init__.py."""
        for sub in ["configs", "utils", "components",
                    "components/networking", "components/security", "components/compute"]:
            assert (PACKAGE_DIR / sub / "__init__.py").exists(), f"Missing __init__.py in {sub}"


class TestComponentStructure:
    """Validate component class structure and inheritance."""

    @pytest.mark.parametrize(
        "module, component, outputs",
        [
            ("apache_fleet.components.networking.vpc", "VpcComponent", "VpcOutputs"),
            ("apache_fleet.components.networking.security_groups",
             "WebSecurityGroupComponent", "SecurityGroupOutputs"),
            ("apache_fleet.components.security.key_pair", "KeyPairComponent", "KeyPairOutputs"),
            ("apache_fleet.components.compute.web_servers", "WebServersComponent", "WebServersOutputs"),
            ("apache_fleet.components.compute.nlb", "NlbComponent", "NlbOutputs"),
        ],
    )
    def test_component_has_outputs(self, module, component, outputs):
        """Each component is a ComponentResource with a dataclass of outputs."""
        import importlib

        mod = importlib.import_module(module)
        component_cls = getattr(mod, component)

        assert issubclass(component_cls, pulumi.ComponentResource)
        assert hasattr(component_cls, "get_outputs")
        assert is_dataclass(getattr(mod, outputs))

    def test_package_exports(self):
        """Subpackage __init__ files should export component classes."""
        from apache_fleet.components.networking import VpcComponent, WebSecurityGroupComponent
        from apache_fleet.components.security import KeyPairComponent
        from apache_fleet.components.compute import NlbComponent, WebServersComponent

        assert all(
            isinstance(cls, type)
            for cls in [VpcComponent, WebSecurityGroupComponent, KeyPairComponent,
                        NlbComponent, WebServersComponent]
        )

    def test_vpc_outputs_fields(self):
        """VpcOutputs should expose the subnet id list."""
        from apache_fleet.components.networking.vpc import VpcOutputs

        fields = {f.name for f in VpcOutputs.__dataclass_fields__.values()}
        assert {"vpc_id", "public_subnet_ids", "internet_gateway_id"}.issubset(fields)

    def test_nlb_outputs_fields(self):
        """NlbOutputs should include the static public IPs."""
        from apache_fleet.components.compute.nlb import NlbOutputs

        fields = {f.name for f in NlbOutputs.__dataclass_fields__.values()}
        assert {"nlb_dns_name", "target_group_arn", "public_ips"}.issubset(fields)


class TestModuleDocumentation:
    """Validate that modules have proper documentation."""

    def test_main_module_has_docstring_and_main(self):
        """__main__.py should have a module docstring and a documented main()."""
        tree = ast.parse((PACKAGE_DIR / "__main__.py").read_text())

        assert ast.get_docstring(tree)

        main_func = next(
            (n for n in ast.walk(tree) if isinstance(n, ast.FunctionDef) and n.name == "main"),
            None,
        )
        assert main_func is not None, "main() function not found in __main__.py"
        assert ast.get_docstring(main_func) is not None

    def test_component_modules_have_docstrings(self):
        """Component modules should have docstrings."""
        from apache_fleet.components.networking import vpc, security_groups
        from apache_fleet.components.compute import nlb, web_servers

        for module in [vpc, security_groups, nlb, web_servers]:
            assert module.__doc__ is not None
            assert len(module.__doc__.strip()) > 0
