"""
Reference resource catalogs per FHIR version.

Base resources are every exportable resource type of a version; the patient
compartment lists the resource types that belong to a patient-centric scope.
"""

from typing import FrozenSet, Tuple, Union

from ..types.operations import FhirVersion, parse_fhir_version


BASE_R4_RESOURCES: Tuple[str, ...] = (
    'Account', 'ActivityDefinition', 'AdverseEvent', 'AllergyIntolerance', 'Appointment',
    'AppointmentResponse', 'AuditEvent', 'Basic', 'Binary', 'BiologicallyDerivedProduct',
    'BodyStructure', 'Bundle', 'CapabilityStatement', 'CarePlan', 'CareTeam', 'CatalogEntry',
    'ChargeItem', 'ChargeItemDefinition', 'Claim', 'ClaimResponse', 'ClinicalImpression',
    'CodeSystem', 'Communication', 'CommunicationRequest', 'CompartmentDefinition',
    'Composition', 'ConceptMap', 'Condition', 'Consent', 'Contract', 'Coverage',
    'CoverageEligibilityRequest', 'CoverageEligibilityResponse', 'DetectedIssue', 'Device',
    'DeviceDefinition', 'DeviceMetric', 'DeviceRequest', 'DeviceUseStatement',
    'DiagnosticReport', 'DocumentManifest', 'DocumentReference', 'EffectEvidenceSynthesis',
    'Encounter', 'Endpoint', 'EnrollmentRequest', 'EnrollmentResponse', 'EpisodeOfCare',
    'EventDefinition', 'Evidence', 'EvidenceVariable', 'ExampleScenario',
    'ExplanationOfBenefit', 'FamilyMemberHistory', 'Flag', 'Goal', 'GraphDefinition', 'Group',
    'GuidanceResponse', 'HealthcareService', 'ImagingStudy', 'Immunization',
    'ImmunizationEvaluation', 'ImmunizationRecommendation', 'ImplementationGuide',
    'InsurancePlan', 'Invoice', 'Library', 'Linkage', 'List', 'Location', 'Measure',
    'MeasureReport', 'Media', 'Medication', 'MedicationAdministration', 'MedicationDispense',
    'MedicationKnowledge', 'MedicationRequest', 'MedicationStatement', 'MedicinalProduct',
    'MedicinalProductAuthorization', 'MedicinalProductContraindication',
    'MedicinalProductIndication', 'MedicinalProductIngredient', 'MedicinalProductInteraction',
    'MedicinalProductManufactured', 'MedicinalProductPackaged',
    'MedicinalProductPharmaceutical', 'MedicinalProductUndesirableEffect', 'MessageDefinition',
    'MessageHeader', 'MolecularSequence', 'NamingSystem', 'NutritionOrder', 'Observation',
    'ObservationDefinition', 'OperationDefinition', 'OperationOutcome', 'Organization',
    'OrganizationAffiliation', 'Patient', 'PaymentNotice', 'PaymentReconciliation', 'Person',
    'PlanDefinition', 'Practitioner', 'PractitionerRole', 'Procedure', 'Provenance',
    'Questionnaire', 'QuestionnaireResponse', 'RelatedPerson', 'RequestGroup',
    'ResearchDefinition', 'ResearchElementDefinition', 'ResearchStudy', 'ResearchSubject',
    'RiskAssessment', 'RiskEvidenceSynthesis', 'Schedule', 'SearchParameter', 'ServiceRequest',
    'Slot', 'Specimen', 'SpecimenDefinition', 'StructureDefinition', 'StructureMap',
    'Subscription', 'Substance', 'SubstanceNucleicAcid', 'SubstancePolymer',
    'SubstanceProtein', 'SubstanceReferenceInformation', 'SubstanceSourceMaterial',
    'SubstanceSpecification', 'SupplyDelivery', 'SupplyRequest', 'Task',
    'TerminologyCapabilities', 'TestReport', 'TestScript', 'ValueSet', 'VerificationResult',
    'VisionPrescription',
)

BASE_STU3_RESOURCES: Tuple[str, ...] = (
    'Account', 'ActivityDefinition', 'AdverseEvent', 'AllergyIntolerance', 'Appointment',
    'AppointmentResponse', 'AuditEvent', 'Basic', 'Binary', 'BodySite', 'Bundle',
    'CapabilityStatement', 'CarePlan', 'CareTeam', 'ChargeItem', 'Claim', 'ClaimResponse',
    'ClinicalImpression', 'CodeSystem', 'Communication', 'CommunicationRequest',
    'CompartmentDefinition', 'Composition', 'ConceptMap', 'Condition', 'Consent', 'Contract',
    'Coverage', 'DataElement', 'DetectedIssue', 'Device', 'DeviceComponent', 'DeviceMetric',
    'DeviceRequest', 'DeviceUseStatement', 'DiagnosticReport', 'DocumentManifest',
    'DocumentReference', 'EligibilityRequest', 'EligibilityResponse', 'Encounter', 'Endpoint',
    'EnrollmentRequest', 'EnrollmentResponse', 'EpisodeOfCare', 'ExpansionProfile',
    'ExplanationOfBenefit', 'FamilyMemberHistory', 'Flag', 'Goal', 'GraphDefinition', 'Group',
    'GuidanceResponse', 'HealthcareService', 'ImagingManifest', 'ImagingStudy', 'Immunization',
    'ImmunizationRecommendation', 'ImplementationGuide', 'Library', 'Linkage', 'List',
    'Location', 'Measure', 'MeasureReport', 'Media', 'Medication', 'MedicationAdministration',
    'MedicationDispense', 'MedicationRequest', 'MedicationStatement', 'MessageDefinition',
    'MessageHeader', 'NamingSystem', 'NutritionOrder', 'Observation', 'OperationDefinition',
    'OperationOutcome', 'Organization', 'Patient', 'PaymentNotice', 'PaymentReconciliation',
    'Person', 'PlanDefinition', 'Practitioner', 'PractitionerRole', 'Procedure',
    'ProcedureRequest', 'ProcessRequest', 'ProcessResponse', 'Provenance', 'Questionnaire',
    'QuestionnaireResponse', 'ReferralRequest', 'RelatedPerson', 'RequestGroup',
    'ResearchStudy', 'ResearchSubject', 'RiskAssessment', 'Schedule', 'SearchParameter',
    'Sequence', 'ServiceDefinition', 'Slot', 'Specimen', 'StructureDefinition', 'StructureMap',
    'Subscription', 'Substance', 'SupplyDelivery', 'SupplyRequest', 'Task', 'TestReport',
    'TestScript', 'ValueSet', 'VisionPrescription',
)

R4_PATIENT_COMPARTMENT_RESOURCES: Tuple[str, ...] = (
    'Account', 'AdverseEvent', 'AllergyIntolerance', 'Appointment', 'AppointmentResponse',
    'AuditEvent', 'Basic', 'BodyStructure', 'CarePlan', 'CareTeam', 'ChargeItem', 'Claim',
    'ClaimResponse', 'ClinicalImpression', 'Communication', 'CommunicationRequest',
    'Composition', 'Condition', 'Consent', 'Coverage', 'CoverageEligibilityRequest',
    'CoverageEligibilityResponse', 'DetectedIssue', 'DeviceRequest', 'DeviceUseStatement',
    'DiagnosticReport', 'DocumentManifest', 'DocumentReference', 'Encounter',
    'EnrollmentRequest', 'EpisodeOfCare', 'ExplanationOfBenefit', 'FamilyMemberHistory', 'Flag',
    'Goal', 'Group', 'ImagingStudy', 'Immunization', 'ImmunizationEvaluation',
    'ImmunizationRecommendation', 'Invoice', 'List', 'MeasureReport', 'Media',
    'MedicationAdministration', 'MedicationDispense', 'MedicationRequest', 'MedicationStatement',
    'MolecularSequence', 'NutritionOrder', 'Observation', 'Patient', 'Person', 'Procedure',
    'Provenance', 'QuestionnaireResponse', 'RelatedPerson', 'RequestGroup', 'ResearchSubject',
    'RiskAssessment', 'Schedule', 'ServiceRequest', 'Specimen', 'SupplyDelivery',
    'SupplyRequest', 'VisionPrescription',
)

STU3_PATIENT_COMPARTMENT_RESOURCES: Tuple[str, ...] = (
    'Account', 'AdverseEvent', 'AllergyIntolerance', 'Appointment', 'AppointmentResponse',
    'AuditEvent', 'Basic', 'BodySite', 'CarePlan', 'CareTeam', 'ChargeItem', 'Claim',
    'ClaimResponse', 'ClinicalImpression', 'Communication', 'CommunicationRequest',
    'Composition', 'Condition', 'Consent', 'Coverage', 'DetectedIssue', 'DeviceRequest',
    'DeviceUseStatement', 'DiagnosticReport', 'DocumentManifest', 'DocumentReference',
    'EligibilityRequest', 'Encounter', 'EnrollmentRequest', 'EpisodeOfCare',
    'ExplanationOfBenefit', 'FamilyMemberHistory', 'Flag', 'Goal', 'Group', 'ImagingManifest',
    'ImagingStudy', 'Immunization', 'ImmunizationRecommendation', 'List', 'MeasureReport',
    'Media', 'MedicationAdministration', 'MedicationDispense', 'MedicationRequest',
    'MedicationStatement', 'NutritionOrder', 'Observation', 'Patient', 'Person', 'Procedure',
    'ProcedureRequest', 'Provenance', 'QuestionnaireResponse', 'ReferralRequest',
    'RelatedPerson', 'RequestGroup', 'ResearchSubject', 'RiskAssessment', 'Schedule',
    'Specimen', 'SupplyDelivery', 'SupplyRequest', 'VisionPrescription',
)

_BASE_RESOURCES = {
    FhirVersion.R4: frozenset(BASE_R4_RESOURCES),
    FhirVersion.STU3: frozenset(BASE_STU3_RESOURCES),
}

_PATIENT_COMPARTMENT_RESOURCES = {
    FhirVersion.R4: frozenset(R4_PATIENT_COMPARTMENT_RESOURCES),
    FhirVersion.STU3: frozenset(STU3_PATIENT_COMPARTMENT_RESOURCES),
}


def base_resources(version: Union[FhirVersion, str]) -> FrozenSet[str]:
    """Full catalog of exportable resource types for a FHIR version."""
    return _BASE_RESOURCES[parse_fhir_version(version)]


def patient_compartment_resources(version: Union[FhirVersion, str]) -> FrozenSet[str]:
    """Resource types in the patient compartment for a FHIR version."""
    return _PATIENT_COMPARTMENT_RESOURCES[parse_fhir_version(version)]
