"""Operation table of the Insights for Medical Literature service."""

from typing import Tuple

from .._utils._operation import (
    ArrayFormat,
    OperationSpec,
    body,
    body_field,
    header,
    path,
    query,
)
from .._utils.constants import CONTENT_TYPE_JSON

_DOCUMENT = "/v1/corpora/{corpus}/documents/{document_id}"
_CONCEPT = "/v1/corpora/{corpus}/concepts/{name_or_id}"

_CORPUS = path("corpus")
_DOCUMENT_ID = path("document_id")
_NAME_OR_ID = path("name_or_id")

IML_OPERATIONS: Tuple[OperationSpec, ...] = (
    # documents
    OperationSpec(
        "get_documents",
        "GET",
        "/v1/corpora/{corpus}/documents",
        (_CORPUS,),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve document information for a corpus.",
    ),
    OperationSpec(
        "add_corpus_document",
        "POST",
        "/v1/corpora/{corpus}/documents",
        (
            _CORPUS,
            body_field("document"),
            body_field("acd_url", "acdUrl"),
            body_field("api_key", "apiKey"),
            body_field("flow_id", "flowId"),
            body_field("access_token", "accessToken"),
            body_field("other_annotators", "otherAnnotators"),
        ),
        content_type=CONTENT_TYPE_JSON,
        summary="Define a document for a corpus.",
    ),
    OperationSpec(
        "get_document_info",
        "GET",
        _DOCUMENT,
        (_CORPUS, _DOCUMENT_ID, query("verbose")),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve document metadata.",
    ),
    OperationSpec(
        "get_document_annotations",
        "GET",
        _DOCUMENT + "/annotations",
        (
            _CORPUS,
            _DOCUMENT_ID,
            query("document_section", required=True),
            query("cuis"),
            query("include_text"),
        ),
        summary="Get document annotations for a section.",
    ),
    OperationSpec(
        "get_document_categories",
        "GET",
        _DOCUMENT + "/categories",
        (
            _CORPUS,
            _DOCUMENT_ID,
            query("highlight_tag_begin"),
            query("highlight_tag_end"),
            query("types"),
            query("category"),
            query("only_negated_concepts"),
            query("fields", "_fields"),
            query("limit", "_limit"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Categorize a document.",
    ),
    OperationSpec(
        "get_document_multiple_categories",
        "POST",
        _DOCUMENT + "/categories",
        (
            _CORPUS,
            _DOCUMENT_ID,
            body_field("model_license", "modelLicense"),
            body_field("highlighted_title", "highlightedTitle"),
            body_field("highlighted_abstract", "highlightedAbstract"),
            body_field("highlighted_body", "highlightedBody"),
            body_field("highlighted_sections", "highlightedSections"),
            body_field("passages"),
            body_field("annotations"),
            query("highlight_tag_begin"),
            query("highlight_tag_end"),
            query("fields", "_fields"),
            query("limit", "_limit"),
        ),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_JSON,
        summary="Categorize a document by several categories at once.",
    ),
    OperationSpec(
        "get_search_matches",
        "GET",
        _DOCUMENT + "/search_matches",
        (
            _CORPUS,
            _DOCUMENT_ID,
            query("min_score", required=True),
            query("cuis"),
            query("text"),
            query("types"),
            query("limit", "_limit"),
            query("search_tag_begin"),
            query("search_tag_end"),
            query("related_tag_begin"),
            query("related_tag_end"),
            query("fields", "_fields"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Find concept and text matches in a document.",
    ),
    # status
    OperationSpec(
        "get_health_check_status",
        "GET",
        "/v1/status/health_check",
        (header("accept", "Accept"), query("format")),
        summary="Determine if the service is up and running.",
    ),
    # search
    OperationSpec(
        "search",
        "POST",
        "/v1/corpora/{corpus}/search",
        (_CORPUS, body("body", required=True), query("verbose")),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_JSON,
        summary="Search a corpus for concepts, keywords and documents.",
    ),
    OperationSpec(
        "get_fields",
        "GET",
        "/v1/corpora/{corpus}/search/metadata",
        (_CORPUS,),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve the searchable metadata fields of a corpus.",
    ),
    OperationSpec(
        "typeahead",
        "GET",
        "/v1/corpora/{corpus}/search/typeahead",
        (
            _CORPUS,
            query("query", required=True),
            query("ontologies"),
            query("types"),
            query("category"),
            query("verbose"),
            query("limit", "_limit"),
            query("max_hit_count"),
            query("no_duplicates"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Find concepts matching a partial term.",
    ),
    # corpora
    OperationSpec(
        "get_corpora_config",
        "GET",
        "/v1/corpora",
        (query("verbose"),),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve the configuration of all corpora.",
    ),
    OperationSpec(
        "set_corpus_schema",
        "POST",
        "/v1/corpora",
        (
            body_field("enrichment_targets", "enrichmentTargets"),
            body_field("metadata_fields", "metadataFields"),
            body_field("corpus_name", "corpusName"),
            body_field("references"),
        ),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_JSON,
        summary="Define the schema of a corpus.",
    ),
    OperationSpec(
        "delete_corpus_schema",
        "DELETE",
        "/v1/corpora",
        (query("instance", required=True),),
        accept=CONTENT_TYPE_JSON,
        summary="Delete a corpus schema.",
    ),
    OperationSpec(
        "set_corpus_config",
        "POST",
        "/v1/corpora/configure",
        (
            body_field("user_name", "userName"),
            body_field("password"),
            body_field("corpus_uri", "corpusURI"),
        ),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_JSON,
        summary="Configure the search database of the corpora.",
    ),
    OperationSpec(
        "monitor_corpus",
        "PUT",
        "/v1/corpora/monitor",
        (query("apikey", required=True),),
        summary="Enable monitoring of corpus activity.",
    ),
    OperationSpec(
        "enable_corpus_search_tracking",
        "PUT",
        "/v1/corpora/tracking",
        (query("enable_tracking"),),
        summary="Toggle tracking of search activity.",
    ),
    OperationSpec(
        "get_corpus_config",
        "GET",
        "/v1/corpora/{corpus}",
        (_CORPUS, query("verbose")),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve the configuration of a corpus.",
    ),
    # concepts
    OperationSpec(
        "get_concepts",
        "GET",
        "/v1/corpora/{corpus}/concepts",
        (
            _CORPUS,
            query("cuis", array_format=ArrayFormat.CSV),
            query("preferred_names", array_format=ArrayFormat.CSV),
            query("surface_forms", array_format=ArrayFormat.CSV),
            query("attributes", array_format=ArrayFormat.CSV),
            query("verbose"),
            query("sort", "_sort"),
            query("limit", "_limit"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve information for concepts.",
    ),
    OperationSpec(
        "add_artifact",
        "POST",
        "/v1/corpora/{corpus}/concepts/definitions",
        (
            _CORPUS,
            body_field("dictionary_entry", "dictionaryEntry"),
            body_field("attribute_entry", "attributeEntry"),
        ),
        content_type=CONTENT_TYPE_JSON,
        summary="Add a custom concept or attribute to a corpus.",
    ),
    OperationSpec(
        "get_cui_info",
        "GET",
        _CONCEPT,
        (
            _CORPUS,
            _NAME_OR_ID,
            query("ontology"),
            query("fields", "_fields"),
            query("tree_layout"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve information about a concept.",
    ),
    OperationSpec(
        "get_hit_count",
        "GET",
        _CONCEPT + "/hit_count",
        (_CORPUS, _NAME_OR_ID, query("ontology")),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve the number of documents mentioning a concept.",
    ),
    OperationSpec(
        "get_related_concepts",
        "GET",
        _CONCEPT + "/related_concepts",
        (
            _CORPUS,
            _NAME_OR_ID,
            query("relationship", required=True),
            query("ontology"),
            query("relationship_attributes"),
            query("sources"),
            query("recursive"),
            query("tree_layout"),
            query("max_depth"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Retrieve concepts related to a concept.",
    ),
    OperationSpec(
        "get_similar_concepts",
        "GET",
        _CONCEPT + "/similar_concepts",
        (
            _CORPUS,
            _NAME_OR_ID,
            query("return_ontologies", required=True),
            query("ontology"),
            query("limit", "_limit"),
        ),
        accept=CONTENT_TYPE_JSON,
        summary="Find concepts similar to a concept.",
    ),
)
