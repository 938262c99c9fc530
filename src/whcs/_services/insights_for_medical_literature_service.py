from typing import Any, Dict, List, Mapping, Optional, Union

from .._config import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ServiceDefaults
from .._utils._auth import Authenticator
from .._utils._logs import setup_logging
from .._utils._operation import OperationSpec
from ..models.annotator_for_clinical_data import HealthCheckAccept, HealthCheckFormat
from ..models.insights_for_medical_literature import (
    AttributeEntry,
    Category,
    DictionaryEntry,
    Ontologies,
    Relationship,
)
from ..models.response import DetailedResponse
from ._executor import RequestExecutor
from ._iml_operations import IML_OPERATIONS
from ._invoker import OperationInvoker, create_invoker

IML_DEFAULTS = ServiceDefaults(
    name="insights_for_medical_literature",
    url="https://insights-for-medical-literature.cloud.ibm.com/services/medical_insights/api",
)

Headers = Optional[Mapping[str, Optional[str]]]


class InsightsForMedicalLiteratureV1:
    """Client for the Insights for Medical Literature service.

    The service indexes medical literature enriched with concept annotations
    and answers concept, category and search queries over the resulting
    corpora.

    Examples:
        ```python
        from whcs import InsightsForMedicalLiteratureV1

        iml = InsightsForMedicalLiteratureV1("2023-01-01")
        response = await iml.typeahead("medline", "heart", ontologies=["concepts"])
        await iml.aclose()
        ```
    """

    def __init__(
        self,
        version: Optional[str] = None,
        *,
        authenticator: Optional[Authenticator] = None,
        service_url: Optional[str] = None,
        service_name: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        disable_ssl_verification: Optional[bool] = None,
        executor: Optional[RequestExecutor] = None,
        debug: bool = False,
    ) -> None:
        """Create a client.

        Takes the same arguments as :class:`AnnotatorForClinicalDataAcdV1`;
        external configuration is read for ``insights_for_medical_literature``
        unless ``service_name`` says otherwise.

        Raises:
            MissingParametersError: If ``version`` is not given.
        """
        if debug:
            setup_logging(debug=True)
        self._invoker = create_invoker(
            IML_DEFAULTS,
            IML_OPERATIONS,
            version=version,
            authenticator=authenticator,
            service_url=service_url,
            service_name=service_name,
            headers=headers,
            timeout=timeout,
            max_retries=max_retries,
            disable_ssl_verification=disable_ssl_verification,
            executor=executor,
        )

    @property
    def invoker(self) -> OperationInvoker:
        return self._invoker

    @property
    def operations(self) -> Mapping[str, OperationSpec]:
        return self._invoker.operations

    async def invoke(
        self, operation: str, *, headers: Headers = None, **params: Any
    ) -> DetailedResponse:
        """Call any operation of the service by name."""
        return await self._invoker.invoke(operation, params, headers)

    async def aclose(self) -> None:
        aclose = getattr(self._invoker.executor, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "InsightsForMedicalLiteratureV1":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # documents

    async def get_documents(
        self, corpus: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        """List the documents of a corpus."""
        return await self._invoker.invoke("get_documents", {"corpus": corpus}, headers)

    async def add_corpus_document(
        self,
        corpus: Optional[str] = None,
        *,
        document: Optional[Dict[str, Any]] = None,
        acd_url: Optional[str] = None,
        api_key: Optional[str] = None,
        flow_id: Optional[str] = None,
        access_token: Optional[str] = None,
        other_annotators: Optional[List[Dict[str, Any]]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Add a document to a corpus and annotate it.

        Args:
            corpus (str): Corpus name.
            document (Optional[Dict[str, Any]]): The document, its fields keyed
                by name.
            acd_url (Optional[str]): Annotator for Clinical Data endpoint used
                to annotate the document.
            api_key (Optional[str]): API key for ``acd_url``.
            flow_id (Optional[str]): Annotator flow to run.
            access_token (Optional[str]): Token for ``acd_url``, used instead
                of ``api_key``.
            other_annotators (Optional[List[Dict[str, Any]]]): Additional
                annotators to run.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "add_corpus_document",
            {
                "corpus": corpus,
                "document": document,
                "acd_url": acd_url,
                "api_key": api_key,
                "flow_id": flow_id,
                "access_token": access_token,
                "other_annotators": other_annotators,
            },
            headers,
        )

    async def get_document_info(
        self,
        corpus: Optional[str] = None,
        document_id: Optional[str] = None,
        *,
        verbose: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        return await self._invoker.invoke(
            "get_document_info",
            {"corpus": corpus, "document_id": document_id, "verbose": verbose},
            headers,
        )

    async def get_document_annotations(
        self,
        corpus: Optional[str] = None,
        document_id: Optional[str] = None,
        document_section: Optional[str] = None,
        *,
        cuis: Optional[List[str]] = None,
        include_text: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Get the annotations of one section of a document.

        Args:
            corpus (str): Corpus name.
            document_id (str): Document ID.
            document_section (str): Section to return annotations for, for
                example ``title``.
            cuis (Optional[List[str]]): Only return these concepts.
            include_text (Optional[bool]): Include the covered text.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "get_document_annotations",
            {
                "corpus": corpus,
                "document_id": document_id,
                "document_section": document_section,
                "cuis": cuis,
                "include_text": include_text,
            },
            headers,
        )

    async def get_document_categories(
        self,
        corpus: Optional[str] = None,
        document_id: Optional[str] = None,
        *,
        highlight_tag_begin: Optional[str] = None,
        highlight_tag_end: Optional[str] = None,
        types: Optional[List[str]] = None,
        category: Optional[Union[Category, str]] = None,
        only_negated_concepts: Optional[bool] = None,
        fields: Optional[str] = None,
        limit: Optional[int] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Categorize a document and highlight the matching concepts.

        Args:
            corpus (str): Corpus name.
            document_id (str): Document ID.
            highlight_tag_begin (Optional[str]): Opening tag of highlights,
                for example ``<b>``.
            highlight_tag_end (Optional[str]): Closing tag of highlights.
            types (Optional[List[str]]): Semantic types to highlight.
            category (Optional[Category]): Predefined category.
            only_negated_concepts (Optional[bool]): Only highlight negated
                concepts.
            fields (Optional[str]): Document fields to return.
            limit (Optional[int]): Maximum number of results.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "get_document_categories",
            {
                "corpus": corpus,
                "document_id": document_id,
                "highlight_tag_begin": highlight_tag_begin,
                "highlight_tag_end": highlight_tag_end,
                "types": types,
                "category": category,
                "only_negated_concepts": only_negated_concepts,
                "fields": fields,
                "limit": limit,
            },
            headers,
        )

    async def get_document_multiple_categories(
        self,
        corpus: Optional[str] = None,
        document_id: Optional[str] = None,
        *,
        model_license: Optional[str] = None,
        highlighted_title: Optional[Dict[str, Any]] = None,
        highlighted_abstract: Optional[Dict[str, Any]] = None,
        highlighted_body: Optional[Dict[str, Any]] = None,
        highlighted_sections: Optional[Dict[str, Any]] = None,
        passages: Optional[Dict[str, Any]] = None,
        annotations: Optional[Dict[str, Any]] = None,
        highlight_tag_begin: Optional[str] = None,
        highlight_tag_end: Optional[str] = None,
        fields: Optional[str] = None,
        limit: Optional[int] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Categorize a document against several categories in one call."""
        return await self._invoker.invoke(
            "get_document_multiple_categories",
            {
                "corpus": corpus,
                "document_id": document_id,
                "model_license": model_license,
                "highlighted_title": highlighted_title,
                "highlighted_abstract": highlighted_abstract,
                "highlighted_body": highlighted_body,
                "highlighted_sections": highlighted_sections,
                "passages": passages,
                "annotations": annotations,
                "highlight_tag_begin": highlight_tag_begin,
                "highlight_tag_end": highlight_tag_end,
                "fields": fields,
                "limit": limit,
            },
            headers,
        )

    async def get_search_matches(
        self,
        corpus: Optional[str] = None,
        document_id: Optional[str] = None,
        min_score: Optional[float] = None,
        *,
        cuis: Optional[List[str]] = None,
        text: Optional[List[str]] = None,
        types: Optional[List[str]] = None,
        limit: Optional[int] = None,
        search_tag_begin: Optional[str] = None,
        search_tag_end: Optional[str] = None,
        related_tag_begin: Optional[str] = None,
        related_tag_end: Optional[str] = None,
        fields: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Find where search terms and related concepts occur in a document.

        Args:
            corpus (str): Corpus name.
            document_id (str): Document ID.
            min_score (float): Minimum match score.
            cuis (Optional[List[str]]): Concepts to match.
            text (Optional[List[str]]): Keywords to match.
            types (Optional[List[str]]): Semantic types to match.
            limit (Optional[int]): Maximum number of matches.
            search_tag_begin (Optional[str]): Opening tag for search matches.
            search_tag_end (Optional[str]): Closing tag for search matches.
            related_tag_begin (Optional[str]): Opening tag for related concepts.
            related_tag_end (Optional[str]): Closing tag for related concepts.
            fields (Optional[str]): Document fields to return.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "get_search_matches",
            {
                "corpus": corpus,
                "document_id": document_id,
                "min_score": min_score,
                "cuis": cuis,
                "text": text,
                "types": types,
                "limit": limit,
                "search_tag_begin": search_tag_begin,
                "search_tag_end": search_tag_end,
                "related_tag_begin": related_tag_begin,
                "related_tag_end": related_tag_end,
                "fields": fields,
            },
            headers,
        )

    # status

    async def get_health_check_status(
        self,
        *,
        accept: Optional[Union[HealthCheckAccept, str]] = None,
        format: Optional[Union[HealthCheckFormat, str]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Check whether the service is up."""
        return await self._invoker.invoke(
            "get_health_check_status", {"accept": accept, "format": format}, headers
        )

    # search

    async def search(
        self,
        corpus: Optional[str] = None,
        body: Optional[Union[Dict[str, Any], str, bytes]] = None,
        *,
        verbose: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Search a corpus.

        Args:
            corpus (str): Corpus name.
            body: The search definition, either as a dict or as an already
                encoded JSON string which is sent unchanged.
            verbose (Optional[bool]): Return verbose results.
            headers: Extra request headers.

        Examples:
            ```python
            await iml.search(
                "medline",
                {"query": {"concepts": [{"cui": "C0018787"}]}, "returnTypes": {}},
            )
            ```
        """
        return await self._invoker.invoke(
            "search", {"corpus": corpus, "body": body, "verbose": verbose}, headers
        )

    async def get_fields(
        self, corpus: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke("get_fields", {"corpus": corpus}, headers)

    async def typeahead(
        self,
        corpus: Optional[str] = None,
        query: Optional[str] = None,
        *,
        ontologies: Optional[List[Union[Ontologies, str]]] = None,
        types: Optional[List[str]] = None,
        category: Optional[Union[Category, str]] = None,
        verbose: Optional[bool] = None,
        limit: Optional[int] = None,
        max_hit_count: Optional[int] = None,
        no_duplicates: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Suggest concepts for a partial term.

        Args:
            corpus (str): Corpus name.
            query (str): The partial term.
            ontologies (Optional[List[Ontologies]]): Ontologies to search.
            types (Optional[List[str]]): Semantic types to include.
            category (Optional[Category]): Predefined category.
            verbose (Optional[bool]): Return verbose results.
            limit (Optional[int]): Maximum number of suggestions.
            max_hit_count (Optional[int]): Skip concepts with more hits.
            no_duplicates (Optional[bool]): Drop suggestions with the same
                preferred name.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "typeahead",
            {
                "corpus": corpus,
                "query": query,
                "ontologies": ontologies,
                "types": types,
                "category": category,
                "verbose": verbose,
                "limit": limit,
                "max_hit_count": max_hit_count,
                "no_duplicates": no_duplicates,
            },
            headers,
        )

    # corpora

    async def get_corpora_config(
        self, *, verbose: Optional[bool] = None, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke(
            "get_corpora_config", {"verbose": verbose}, headers
        )

    async def set_corpus_schema(
        self,
        *,
        enrichment_targets: Optional[List[Dict[str, Any]]] = None,
        metadata_fields: Optional[List[Dict[str, Any]]] = None,
        corpus_name: Optional[str] = None,
        references: Optional[Dict[str, Any]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Create the search schema of a new corpus.

        Args:
            enrichment_targets (Optional[List[Dict[str, Any]]]): Fields to
                annotate.
            metadata_fields (Optional[List[Dict[str, Any]]]): Searchable
                metadata fields.
            corpus_name (Optional[str]): Corpus name.
            references (Optional[Dict[str, Any]]): Ontology references.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "set_corpus_schema",
            {
                "enrichment_targets": enrichment_targets,
                "metadata_fields": metadata_fields,
                "corpus_name": corpus_name,
                "references": references,
            },
            headers,
        )

    async def delete_corpus_schema(
        self, instance: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        """Delete the corpus ``instance`` and its schema."""
        return await self._invoker.invoke(
            "delete_corpus_schema", {"instance": instance}, headers
        )

    async def set_corpus_config(
        self,
        *,
        user_name: Optional[str] = None,
        password: Optional[str] = None,
        corpus_uri: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Point the service at the search database holding the corpora."""
        return await self._invoker.invoke(
            "set_corpus_config",
            {"user_name": user_name, "password": password, "corpus_uri": corpus_uri},
            headers,
        )

    async def monitor_corpus(
        self, apikey: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke("monitor_corpus", {"apikey": apikey}, headers)

    async def enable_corpus_search_tracking(
        self, *, enable_tracking: Optional[bool] = None, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke(
            "enable_corpus_search_tracking",
            {"enable_tracking": enable_tracking},
            headers,
        )

    async def get_corpus_config(
        self,
        corpus: Optional[str] = None,
        *,
        verbose: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        return await self._invoker.invoke(
            "get_corpus_config", {"corpus": corpus, "verbose": verbose}, headers
        )

    # concepts

    async def get_concepts(
        self,
        corpus: Optional[str] = None,
        *,
        cuis: Optional[List[str]] = None,
        preferred_names: Optional[List[str]] = None,
        surface_forms: Optional[List[str]] = None,
        attributes: Optional[List[str]] = None,
        verbose: Optional[bool] = None,
        sort: Optional[str] = None,
        limit: Optional[int] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Look up concepts of a corpus.

        The list filters are sent as comma separated values.

        Args:
            corpus (str): Corpus name.
            cuis (Optional[List[str]]): Concept IDs.
            preferred_names (Optional[List[str]]): Preferred names.
            surface_forms (Optional[List[str]]): Surface forms.
            attributes (Optional[List[str]]): Attribute names.
            verbose (Optional[bool]): Return verbose results.
            sort (Optional[str]): Sort order, ``count`` or ``-count``.
            limit (Optional[int]): Maximum number of concepts.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "get_concepts",
            {
                "corpus": corpus,
                "cuis": cuis,
                "preferred_names": preferred_names,
                "surface_forms": surface_forms,
                "attributes": attributes,
                "verbose": verbose,
                "sort": sort,
                "limit": limit,
            },
            headers,
        )

    async def add_artifact(
        self,
        corpus: Optional[str] = None,
        *,
        dictionary_entry: Optional[DictionaryEntry] = None,
        attribute_entry: Optional[AttributeEntry] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Add a custom concept or attribute definition to a corpus."""
        return await self._invoker.invoke(
            "add_artifact",
            {
                "corpus": corpus,
                "dictionary_entry": dictionary_entry,
                "attribute_entry": attribute_entry,
            },
            headers,
        )

    async def get_cui_info(
        self,
        corpus: Optional[str] = None,
        name_or_id: Optional[str] = None,
        *,
        ontology: Optional[str] = None,
        fields: Optional[str] = None,
        tree_layout: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Get the definition of a concept given its ID or preferred name.

        Args:
            corpus (str): Corpus name.
            name_or_id (str): Concept ID or preferred name.
            ontology (Optional[str]): Ontology defining the concept.
            fields (Optional[str]): Fields to return.
            tree_layout (Optional[bool]): Return the result as a tree.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "get_cui_info",
            {
                "corpus": corpus,
                "name_or_id": name_or_id,
                "ontology": ontology,
                "fields": fields,
                "tree_layout": tree_layout,
            },
            headers,
        )

    async def get_hit_count(
        self,
        corpus: Optional[str] = None,
        name_or_id: Optional[str] = None,
        *,
        ontology: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Count the documents of a corpus mentioning a concept."""
        return await self._invoker.invoke(
            "get_hit_count",
            {"corpus": corpus, "name_or_id": name_or_id, "ontology": ontology},
            headers,
        )

    async def get_related_concepts(
        self,
        corpus: Optional[str] = None,
        name_or_id: Optional[str] = None,
        relationship: Optional[Union[Relationship, str]] = None,
        *,
        ontology: Optional[str] = None,
        relationship_attributes: Optional[List[str]] = None,
        sources: Optional[List[str]] = None,
        recursive: Optional[bool] = None,
        tree_layout: Optional[bool] = None,
        max_depth: Optional[int] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Walk the relationships of a concept.

        Args:
            corpus (str): Corpus name.
            name_or_id (str): Concept ID or preferred name.
            relationship (Relationship): Relationship to follow, for example
                ``Relationship.CHILDREN``.
            ontology (Optional[str]): Ontology defining the concept.
            relationship_attributes (Optional[List[str]]): Attributes the
                relationships must carry.
            sources (Optional[List[str]]): Sources to include.
            recursive (Optional[bool]): Follow the relationship recursively.
            tree_layout (Optional[bool]): Return the result as a tree.
            max_depth (Optional[int]): Depth limit for recursive walks.
            headers: Extra request headers.
        """
        return await self._invoker.invoke(
            "get_related_concepts",
            {
                "corpus": corpus,
                "name_or_id": name_or_id,
                "relationship": relationship,
                "ontology": ontology,
                "relationship_attributes": relationship_attributes,
                "sources": sources,
                "recursive": recursive,
                "tree_layout": tree_layout,
                "max_depth": max_depth,
            },
            headers,
        )

    async def get_similar_concepts(
        self,
        corpus: Optional[str] = None,
        name_or_id: Optional[str] = None,
        return_ontologies: Optional[List[str]] = None,
        *,
        ontology: Optional[str] = None,
        limit: Optional[int] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        return await self._invoker.invoke(
            "get_similar_concepts",
            {
                "corpus": corpus,
                "name_or_id": name_or_id,
                "return_ontologies": return_ontologies,
                "ontology": ontology,
                "limit": limit,
            },
            headers,
        )
