"""Pydantic models for SAM Entity API responses.

Every field carries the exact upstream JSON key as its alias. Keys are
case-sensitive and some are irregular (``fARResponses``, ``dFARResponses``,
``geographicalAreaServedmetropolitanStatisticalAreaCode``); they must not be
normalized or the data is silently dropped.
"""

from typing import Any, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    model_serializer,
    model_validator,
)


class EntityModel(BaseModel):
    """Base for all Entity API records.

    Absent keys and JSON nulls both leave a field at its zero value.
    Sequences are tuples so parsed values stay immutable and hashable.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        serialize_by_alias=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Every declared sequence holds records, so a null element is a zero
        # record. A null payload itself is left to fail as a non-object.
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [{} if item is None else item for item in value]
            cleaned[key] = value
        return cleaned


# entityRegistration


class Registration(EntityModel):
    """entityRegistration section of a SAM Entity."""

    sam_registered: str = Field("", alias="samRegistered")
    uei_sam: str = Field("", alias="ueiSAM")
    uei_duns: str = Field("", alias="ueiDUNS")
    entity_eft_indicator: str = Field("", alias="entityEFTIndicator")
    cage_code: str = Field("", alias="cageCode")
    dodaac: str = Field("", alias="dodaac")
    legal_business_name: str = Field("", alias="legalBusinessName")
    dba_name: str = Field("", alias="dbaName")
    purpose_of_registration_code: str = Field("", alias="purposeOfRegistrationCode")
    purpose_of_registration_desc: str = Field("", alias="purposeOfRegistrationDesc")
    registration_status: str = Field("", alias="registrationStatus")
    registration_date: str = Field("", alias="registrationDate")
    last_update_date: str = Field("", alias="lastUpdateDate")
    registration_expiration_date: str = Field("", alias="registrationExpirationDate")
    activation_date: str = Field("", alias="activationDate")
    uei_status: str = Field("", alias="ueiStatus")
    uei_expiration_date: str = Field("", alias="ueiExpirationDate")
    uei_creation_date: str = Field("", alias="ueiCreationDate")
    no_public_display_flag: str = Field("", alias="noPublicDisplayFlag")
    exclusion_status_flag: str = Field("", alias="exclusionStatusFlag")
    exclusion_url: str = Field("", alias="exclusionURL")
    dnb_open_data: str = Field("", alias="dnbOpenData")


# Shared records


class Address(EntityModel):
    """Postal address. Empty fields are left out when serialized."""

    address_line1: str = Field("", alias="addressLine1")
    address_line2: str = Field("", alias="addressLine2")
    city: str = Field("", alias="city")
    state_or_province_code: str = Field("", alias="stateOrProvinceCode")
    country_code: str = Field("", alias="countryCode")
    zip_code: str = Field("", alias="zipCode")
    zip_code_plus4: str = Field("", alias="zipCodePlus4")

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict:
        return {k: v for k, v in handler(self).items() if v != ""}


_ADDRESS_KEYS = frozenset(
    key
    for name, info in Address.model_fields.items()
    for key in (name, info.alias)
)


class PointOfContact(EntityModel):
    """A named contact: an Address plus name and title.

    Upstream sends the address keys flattened into the contact object; they
    are gathered into ``address`` on the way in and flattened again on the
    way out.
    """

    address: Address = Field(default_factory=Address)
    first_name: str = Field("", alias="firstName")
    middle_initial: str = Field("", alias="middleInitial")
    last_name: str = Field("", alias="lastName")
    title: str = Field("", alias="title")

    @model_validator(mode="before")
    @classmethod
    def _gather_address(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        contact = {
            k: v for k, v in data.items() if k not in _ADDRESS_KEYS and k != "address"
        }
        address = data.get("address")
        if isinstance(address, Address):
            contact["address"] = address
        else:
            # Upstream has no "address" key; an unexpected one is ignored.
            contact["address"] = {k: v for k, v in data.items() if k in _ADDRESS_KEYS}
        return contact

    @model_serializer(mode="wrap")
    def _flatten_address(self, handler: SerializerFunctionWrapHandler) -> dict:
        contact = handler(self)
        address = contact.pop("address", None) or {}
        return {**address, **contact}


# coreData


class EntityInformation(EntityModel):
    entity_url: str = Field("", alias="entityURL")
    entity_division_name: str = Field("", alias="entityDivisionName")
    entity_division_number: str = Field("", alias="entityDivisionNumber")
    entity_start_date: str = Field("", alias="entityStartDate")
    fiscal_year_end_close_date: str = Field("", alias="fiscalYearEndCloseDate")
    submission_date: str = Field("", alias="submissionDate")


class GeneralInformation(EntityModel):
    entity_structure_code: str = Field("", alias="entityStructureCode")
    entity_structure_desc: str = Field("", alias="entityStructureDesc")
    entity_type_code: str = Field("", alias="entityTypeCode")
    entity_type_desc: str = Field("", alias="entityTypeDesc")
    profit_structure_code: str = Field("", alias="profitStructureCode")
    profit_structure_desc: str = Field("", alias="profitStructureDesc")
    organization_structure_code: str = Field("", alias="organizationStructureCode")
    organization_structure_desc: str = Field("", alias="organizationStructureDesc")
    state_of_incorporation_code: str = Field("", alias="stateOfIncorporationCode")
    state_of_incorporation_desc: str = Field("", alias="stateOfIncorporationDesc")
    country_of_incorporation_code: str = Field("", alias="countryOfIncorporationCode")
    country_of_incorporation_desc: str = Field("", alias="countryOfIncorporationDesc")


class BusinessType(EntityModel):
    business_type_code: str = Field("", alias="businessTypeCode")
    business_type_desc: str = Field("", alias="businessTypeDesc")


class SBABusinessType(EntityModel):
    """SBA certification with its entry and exit dates."""

    sba_business_type_code: str = Field("", alias="sbaBusinessTypeCode")
    sba_business_type_desc: str = Field("", alias="sbaBusinessTypeDesc")
    certification_entry_date: str = Field("", alias="certificationEntryDate")
    certification_exit_date: str = Field("", alias="certificationExitDate")


class BusinessTypes(EntityModel):
    business_type_list: Tuple[BusinessType, ...] = Field(
        default_factory=tuple, alias="businessTypeList"
    )
    sba_business_type_list: Tuple[SBABusinessType, ...] = Field(
        default_factory=tuple, alias="sbaBusinessTypeList"
    )


class FinancialInformation(EntityModel):
    credit_card_usage: str = Field("", alias="creditCardUsage")
    debt_subject_to_offset: str = Field("", alias="debtSubjectToOffset")


class CoreData(EntityModel):
    """coreData section of a SAM Entity."""

    entity_information: EntityInformation = Field(
        default_factory=EntityInformation, alias="entityInformation"
    )
    physical_address: Address = Field(default_factory=Address, alias="physicalAddress")
    mailing_address: Address = Field(default_factory=Address, alias="mailingAddress")
    congressional_district: str = Field("", alias="congressionalDistrict")
    general_information: GeneralInformation = Field(
        default_factory=GeneralInformation, alias="generalInformation"
    )
    business_types: BusinessTypes = Field(
        default_factory=BusinessTypes, alias="businessTypes"
    )
    financial_information: FinancialInformation = Field(
        default_factory=FinancialInformation, alias="financialInformation"
    )


# assertions


class NAICSEntry(EntityModel):
    naics_code: str = Field("", alias="naicsCode")
    naics_description: str = Field("", alias="naicsDescription")
    sba_small_business: str = Field("", alias="sbaSmallBusiness")
    naics_exception: str = Field("", alias="naicsException")


class PSCEntry(EntityModel):
    psc_code: str = Field("", alias="pscCode")
    psc_description: str = Field("", alias="pscDescription")


class GoodsAndServices(EntityModel):
    primary_naics: str = Field("", alias="primaryNaics")
    naics_list: Tuple[NAICSEntry, ...] = Field(
        default_factory=tuple, alias="naicsList"
    )
    psc_list: Tuple[PSCEntry, ...] = Field(default_factory=tuple, alias="pscList")


class GeographicalArea(EntityModel):
    """A disaster-relief service area.

    The metropolitan statistical area keys use a lowercase ``m`` upstream.
    """

    state_code: str = Field("", alias="geographicalAreaServedStateCode")
    state_name: str = Field("", alias="geographicalAreaServedStateName")
    county_code: str = Field("", alias="geographicalAreaServedCountyCode")
    county_name: str = Field("", alias="geographicalAreaServedCountyName")
    statistical_area_code: str = Field(
        "", alias="geographicalAreaServedmetropolitanStatisticalAreaCode"
    )
    statistical_area_name: str = Field(
        "", alias="geographicalAreaServedmetropolitanStatisticalAreaName"
    )


class DisasterReliefData(EntityModel):
    disaster_relief_flag: str = Field("", alias="disasterReliefFlag")
    bonding_flag: str = Field("", alias="bondingFlag")
    geographical_area_served: Tuple[GeographicalArea, ...] = Field(
        default_factory=tuple, alias="geographicalAreaServed"
    )


class EDIInformation(EntityModel):
    edi_information_flag: str = Field("", alias="ediInformationFlag")


class Assertions(EntityModel):
    """assertions section of a SAM Entity."""

    goods_and_services: GoodsAndServices = Field(
        default_factory=GoodsAndServices, alias="goodsAndServices"
    )
    disaster_relief_data: DisasterReliefData = Field(
        default_factory=DisasterReliefData, alias="disasterReliefData"
    )
    edi_information: EDIInformation = Field(
        default_factory=EDIInformation, alias="ediInformation"
    )


# repsAndCerts


class Company(EntityModel):
    id: str = Field("", alias="id")
    name: str = Field("", alias="name")
    tin: str = Field("", alias="tin")
    duns: str = Field("", alias="duns")
    year_established: str = Field("", alias="yearEstablished")


class OwnerCage(EntityModel):
    """One link of an ownership chain (highest-level or immediate owner)."""

    cage_code: str = Field("", alias="cageCode")
    ncage_code: str = Field("", alias="nCageCode")
    legal_business_name: str = Field("", alias="legalBusinessName")
    has_owner: str = Field("", alias="hasOwner")
    id: str = Field("", alias="id")


class PersonDetails(EntityModel):
    first_name: str = Field("", alias="firstName")
    middle_initial: str = Field("", alias="middleInitial")
    last_name: str = Field("", alias="lastName")
    title: str = Field("", alias="title")


class AnswerContact(EntityModel):
    """Contact record attached to a provision answer."""

    id: str = Field("", alias="id")
    first_name: str = Field("", alias="firstName")
    middle_initial: str = Field("", alias="middleInitial")
    last_name: str = Field("", alias="lastName")
    title: str = Field("", alias="title")
    telephone_number: str = Field("", alias="telephoneNumber")
    extension: str = Field("", alias="extension")
    international_number: str = Field("", alias="internationalNumber")


class ArchitectExperience(EntityModel):
    id: str = Field("", alias="id")
    experience_code: str = Field("", alias="experienceCode")
    experience_description: str = Field("", alias="experienceDescription")
    annual_avg_revenue_code: str = Field("", alias="annualAvgRevenueCode")
    annual_avg_revenue_description: str = Field(
        "", alias="annualAvgRevenueDescription"
    )


class DisciplineInfo(EntityModel):
    id: str = Field("", alias="id")
    discipline_id: str = Field("", alias="disciplineID")
    firm_num_of_employees: str = Field("", alias="firmNumOfEmployees")
    branch_num_of_employees: str = Field("", alias="branchNumOfEmployees")
    discipline_description: str = Field("", alias="disciplineDescription")


class Answer(EntityModel):
    """Item-level answer within a provision response.

    Only the sub-lists callers consume are declared. endProductsList,
    foreignGovtEntitiesList, formerFirmsList, fscInfoList,
    jointVentureCompaniesList, laborSurplusConcernsList, naicsList,
    predecessorsList, samFacilitiesList, samPointsOfContactList,
    servicesRevenuesList, softwareList and urlList are ignored.
    """

    section: str = Field("", alias="section")
    question_text: str = Field("", alias="questionText")
    answer_id: str = Field("", alias="answerId")
    answer_text: str = Field("", alias="answerText")
    country: str = Field("", alias="country")
    company: Company = Field(default_factory=Company, alias="company")
    highest_level_owner_cage: OwnerCage = Field(
        default_factory=OwnerCage, alias="highestLevelOwnerCage"
    )
    immediate_owner_cage: OwnerCage = Field(
        default_factory=OwnerCage, alias="immediateOwnerCage"
    )
    person_details: PersonDetails = Field(
        default_factory=PersonDetails, alias="personDetails"
    )
    point_of_contact: AnswerContact = Field(
        default_factory=AnswerContact, alias="pointOfContact"
    )
    architect_experiences_list: Tuple[ArchitectExperience, ...] = Field(
        default_factory=tuple, alias="architectExperiencesList"
    )
    discipline_info_list: Tuple[DisciplineInfo, ...] = Field(
        default_factory=tuple, alias="disciplineInfoList"
    )


class FARResponse(EntityModel):
    """An entity's response to a FAR provision."""

    provision_id: str = Field("", alias="provisionId")
    list_of_answers: Tuple[Answer, ...] = Field(
        default_factory=tuple, alias="listOfAnswers"
    )


# An entity's response to a DFARS provision; same shape as a FAR response.
DFARSResponse = FARResponse


class Certifications(EntityModel):
    far_responses: Tuple[FARResponse, ...] = Field(
        default_factory=tuple, alias="fARResponses"
    )
    # [sic] lowercase "d" upstream
    dfar_responses: Tuple[DFARSResponse, ...] = Field(
        default_factory=tuple, alias="dFARResponses"
    )


class Qualifications(EntityModel):
    """qualifications block; architectEngineerResponses is not parsed."""


class FinancialAssistanceCertifications(EntityModel):
    grants_certification_status: str = Field("", alias="grantsCertificationStatus")
    grants_certifying_response: str = Field("", alias="grantsCertifyingResponse")
    certifier_first_name: str = Field("", alias="certifierFirstName")
    certifier_last_name: str = Field("", alias="certifierLastName")
    certifier_middle_initial: str = Field("", alias="certifierMiddleInitial")


class PDFLinks(EntityModel):
    """Links to the rendered certification documents."""

    far_pdf: str = Field("", alias="farPDF")
    far_and_dfars_pdf: str = Field("", alias="farAndDfarsPDF")
    architect_engineering_pdf: str = Field("", alias="architectEngineeringPDF")
    financial_assistance_certifications_pdf: str = Field(
        "", alias="financialAssistanceCertificationsPDF"
    )


class RepsAndCerts(EntityModel):
    """repsAndCerts section of a SAM Entity."""

    certifications: Certifications = Field(
        default_factory=Certifications, alias="certifications"
    )
    qualifications: Qualifications = Field(
        default_factory=Qualifications, alias="qualifications"
    )
    financial_assistance_certifications: FinancialAssistanceCertifications = Field(
        default_factory=FinancialAssistanceCertifications,
        alias="financialAssistanceCertifications",
    )
    pdf_links: PDFLinks = Field(default_factory=PDFLinks, alias="pdfLinks")


# pointsOfContact


class PointsOfContact(EntityModel):
    """pointsOfContact section: one contact per fixed role."""

    government_business_poc: PointOfContact = Field(
        default_factory=PointOfContact, alias="governmentBusinessPOC"
    )
    government_business_alternate_poc: PointOfContact = Field(
        default_factory=PointOfContact, alias="governmentBusinessAlternatePOC"
    )
    electronic_business_poc: PointOfContact = Field(
        default_factory=PointOfContact, alias="electronicBusinessPOC"
    )
    electronic_business_alternate_poc: PointOfContact = Field(
        default_factory=PointOfContact, alias="electronicBusinessAlternatePOC"
    )
    past_performance_poc: PointOfContact = Field(
        default_factory=PointOfContact, alias="pastPerformancePOC"
    )
    past_performance_alternate_poc: PointOfContact = Field(
        default_factory=PointOfContact, alias="pastPerformanceAlternatePOC"
    )


# Top level


class Entity(EntityModel):
    """A SAM Entity: one registered organization's record."""

    entity_registration: Registration = Field(
        default_factory=Registration, alias="entityRegistration"
    )
    core_data: CoreData = Field(default_factory=CoreData, alias="coreData")
    assertions: Assertions = Field(default_factory=Assertions, alias="assertions")
    reps_and_certs: RepsAndCerts = Field(
        default_factory=RepsAndCerts, alias="repsAndCerts"
    )
    points_of_contact: PointsOfContact = Field(
        default_factory=PointsOfContact, alias="pointsOfContact"
    )


class EntityResponse(EntityModel):
    """SAM Entity API response wrapper (one page of results)."""

    total_records: StrictInt = Field(0, alias="totalRecords")
    entity_data: Tuple[Entity, ...] = Field(
        default_factory=tuple, alias="entityData"
    )
