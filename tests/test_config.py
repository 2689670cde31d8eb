"""
Tests for the rule table, rule document loading and handler settings.
"""

import json

import pytest
import yaml

from fhirrbac.authz import RBACHandler
from fhirrbac.core import HandlerSettings, RBACConfig, Rule, load_rbac_config
from fhirrbac.errors import (
    CONFIGURATION_ERROR,
    ConfigVersionMismatchError,
    RBACConfigError,
    UNAUTHORIZED,
    UnauthorizedError,
)
from fhirrbac.types import BulkDataAuth, FhirVersion, TypeOperation
from fhirrbac.util import get_config_value, load_config_file


class TestRule:
    """Rule model"""

    def test_sets_ignore_order_and_duplicates(self):
        a = Rule(operations=['read', 'create'], resources=['Patient', 'Claim', 'Patient'])
        b = Rule(operations=['create', 'read'], resources=['Claim', 'Patient'])
        assert a == b

    def test_enum_operations_stored_as_names(self):
        rule = Rule(operations=[TypeOperation.READ], resources=['Patient'])
        assert rule.operations == frozenset({'read'})
        assert rule.allows_operation('read')
        assert rule.allows_operation(TypeOperation.READ)

    def test_rule_is_immutable(self):
        rule = Rule(operations=['read'], resources=['Patient'])
        with pytest.raises(AttributeError):
            rule.resources = frozenset({'Claim'})
        assert not hasattr(rule.resources, 'add')


class TestRBACConfig:
    """Rule document parsing and validation"""

    def test_from_dict(self, rbac_rules):
        config = RBACConfig.from_dict(rbac_rules)
        assert config.version == 1.0
        assert set(config.group_rules) == {'practitioner', 'non-practitioner', 'auditor'}
        assert config.rule_for('auditor').resources == frozenset({'Patient'})
        assert config.rule_for('nobody') is None

    def test_group_rules_are_read_only(self, rbac_rules):
        config = RBACConfig.from_dict(rbac_rules)
        with pytest.raises(TypeError):
            config.group_rules['intruder'] = Rule(operations=['read'], resources=['Patient'])

    def test_source_document_changes_do_not_leak(self, rbac_rules):
        config = RBACConfig.from_dict(rbac_rules)
        rbac_rules['groupRules']['auditor']['resources'].append('Claim')
        assert 'Claim' not in config.rule_for('auditor').resources

    def test_to_dict_round_trip(self, rbac_rules):
        config = RBACConfig.from_dict(rbac_rules)
        assert RBACConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("document", [
        [],
        {'groupRules': {}},
        {'version': '1.0', 'groupRules': {}},
        {'version': True, 'groupRules': {}},
        {'version': 1.0},
        {'version': 1.0, 'groupRules': []},
        {'version': 1.0, 'groupRules': {'a': ['read']}},
        {'version': 1.0, 'groupRules': {'a': {'operations': ['read']}}},
        {'version': 1.0, 'groupRules': {'a': {'operations': 'read', 'resources': []}}},
        {'version': 1.0, 'groupRules': {'a': {'operations': ['read'], 'resources': [1]}}},
    ])
    def test_malformed_documents_rejected(self, document):
        with pytest.raises(RBACConfigError) as exc_info:
            RBACConfig.from_dict(document)
        assert exc_info.value.error_code == CONFIGURATION_ERROR

    def test_unknown_operation_rejected(self):
        document = {'version': 1.0, 'groupRules': {'a': {'operations': ['frobnicate'], 'resources': []}}}
        with pytest.raises(RBACConfigError) as exc_info:
            RBACConfig.from_dict(document)
        assert exc_info.value.config_key == 'groupRules.a.operations'

    def test_integer_version_accepted(self):
        config = RBACConfig.from_dict({'version': 1, 'groupRules': {}})
        assert config.version == 1

    @pytest.mark.parametrize("version", [True, '1.0', None])
    def test_direct_construction_rejects_non_numeric_version(self, version):
        """bool compares equal to 1.0, so it must not reach the handler version guard"""
        with pytest.raises(RBACConfigError) as exc_info:
            RBACConfig(version=version, group_rules={})
        assert exc_info.value.config_key == 'version'

    def test_config_is_hashable(self, rbac_rules):
        config = RBACConfig.from_dict(rbac_rules)
        assert hash(config) == hash(RBACConfig.from_dict(rbac_rules))
        assert len({config, RBACConfig.from_dict(rbac_rules)}) == 1

    @pytest.mark.parametrize("operation", [
        'initiate-export', 'get-status-export', 'cancel-export',
        'initiate-import', 'get-status-import', 'cancel-import',
    ])
    def test_bulk_operations_allowed_in_rules(self, operation):
        document = {'version': 1.0, 'groupRules': {'exporter': {'operations': ['read', operation],
                                                                'resources': ['Patient']}}}
        config = RBACConfig.from_dict(document)
        assert config.rule_for('exporter').allows_operation(operation)

    def test_bulk_operation_in_rule_does_not_grant_export(self):
        """Export initiation is decided by read access and resource coverage only"""
        with_bulk = RBACHandler({'version': 1.0, 'groupRules': {
            'exporter': {'operations': ['read', 'initiate-export'], 'resources': ['Patient']},
        }}, '4.0.1')
        without_bulk = RBACHandler({'version': 1.0, 'groupRules': {
            'exporter': {'operations': ['read'], 'resources': ['Patient']},
        }}, '4.0.1')
        for export_type in ('system', 'patient', 'group'):
            auth = BulkDataAuth(operation='initiate-export', export_type=export_type)
            assert with_bulk.is_bulk_data_allowed(['exporter'], auth) is False
            assert without_bulk.is_bulk_data_allowed(['exporter'], auth) is False


class TestLoading:
    """JSON and YAML rule documents"""

    def test_load_json(self, tmp_path, rbac_rules):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(rbac_rules), encoding="utf-8")
        assert load_rbac_config(str(path)) == RBACConfig.from_dict(rbac_rules)

    def test_load_yaml(self, tmp_path, rbac_rules):
        path = tmp_path / "rules.yaml"
        path.write_text(yaml.safe_dump(rbac_rules), encoding="utf-8")
        assert load_rbac_config(str(path)) == RBACConfig.from_dict(rbac_rules)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config_file(str(tmp_path / "absent.yaml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "rules.toml"
        path.write_text("version = 1.0", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config_file(str(path))


class TestHandlerSettings:
    """Environment-driven settings"""

    def test_defaults(self, monkeypatch):
        for key in ("FHIRRBAC_FHIR_VERSION", "FHIRRBAC_GROUPS_CLAIM",
                    "FHIRRBAC_SUBJECT_CLAIM", "FHIRRBAC_RULES_PATH"):
            monkeypatch.delenv(key, raising=False)
        settings = HandlerSettings.from_env()
        assert settings.fhir_version == FhirVersion.R4
        assert settings.groups_claim_key == 'cognito:groups'
        assert settings.subject_claim_key == 'sub'
        assert settings.rules_path is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FHIRRBAC_FHIR_VERSION", "3.0.1")
        monkeypatch.setenv("FHIRRBAC_GROUPS_CLAIM", "roles")
        monkeypatch.setenv("FHIRRBAC_SUBJECT_CLAIM", "oid")
        monkeypatch.setenv("FHIRRBAC_RULES_PATH", "/etc/fhirrbac/rules.yaml")
        settings = HandlerSettings.from_env()
        assert settings.fhir_version == FhirVersion.STU3
        assert settings.groups_claim_key == 'roles'
        assert settings.subject_claim_key == 'oid'
        assert settings.rules_path == '/etc/fhirrbac/rules.yaml'

    def test_unsupported_version(self):
        with pytest.raises(ValueError):
            HandlerSettings(fhir_version='5.0.0')

    def test_validate_rejects_empty_claim_key(self):
        with pytest.raises(ValueError):
            HandlerSettings(groups_claim_key='').validate()

    def test_get_config_value(self, monkeypatch):
        monkeypatch.setenv("FHIRRBAC_GROUPS_CLAIM", "roles")
        assert get_config_value("groups_claim") == "roles"
        assert get_config_value("missing", "fallback") == "fallback"


class TestErrors:
    """Structured errors"""

    def test_unauthorized_carries_no_reason(self):
        error = UnauthorizedError()
        assert error.message == "Unauthorized"
        assert error.details == {}
        assert error.error_code == UNAUTHORIZED
        assert str(error) == "unauthorized: Unauthorized"

    def test_version_mismatch_is_config_error(self):
        error = ConfigVersionMismatchError(1.0, 2.0)
        assert isinstance(error, RBACConfigError)
        assert error.message == "Configuration version does not match handler version"
        assert error.details['expected_version'] == 1.0
