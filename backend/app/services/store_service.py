from sqlalchemy import Integer, and_, func
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql.expression import FunctionElement
from app.exceptions import NotFoundError
from app.models.enums import SortBy, SortOrder
from app.models.prefecture import Prefecture
from app.models.region import Region
from app.models.store import Store
from app.schemas.store import StoreCreate, StoreFilter
from app.services.persistence import save
from app.utils.logger import setup_logger
from app.utils.pagination import PaginatedResult, clamp_page, clamp_size, page_offset

logger = setup_logger("app.services.store")

DEFAULT_SORT_BY = SortBy.ID
DEFAULT_SORT_ORDER = SortOrder.ASC


class substring_position(FunctionElement):
    """
    substring_position(文字列, 部分文字列): 大文字小文字を区別した出現位置（無ければ0）

    SQLite / MySQL の LIKE と違い、大文字小文字を区別する。
    """
    type = Integer()
    inherit_cache = True


@compiles(substring_position)
def _substring_position_default(element, compiler, **kw):
    return "instr(%s)" % compiler.process(element.clauses, **kw)


@compiles(substring_position, "postgresql")
def _substring_position_postgresql(element, compiler, **kw):
    return "strpos(%s)" % compiler.process(element.clauses, **kw)


@compiles(substring_position, "mysql")
def _substring_position_mysql(element, compiler, **kw):
    text, part = list(element.clauses)
    return "instr(BINARY %s, %s)" % (compiler.process(text, **kw), compiler.process(part, **kw))


def build_store_conditions(filters: StoreFilter) -> list:
    """
    絞り込み条件(AND)のリストを組み立てる。未指定の項目は条件に含めない。

    都道府県コードとエリアコードはどちらも prefecture リレーション経由の条件なので、
    必ず1つの has() の中にまとめる。
    """
    conditions = []
    if filters.name:
        conditions.append(substring_position(Store.name, filters.name) > 0)
    if filters.status is not None:
        conditions.append(Store.status == filters.status)

    prefecture_conditions = []
    if filters.prefecture_code is not None:
        prefecture_conditions.append(Prefecture.code == filters.prefecture_code)
    if filters.region_code is not None:
        prefecture_conditions.append(Prefecture.region.has(Region.code == filters.region_code))
    if prefecture_conditions:
        conditions.append(Store.prefecture.has(and_(*prefecture_conditions)))

    return conditions


def build_store_ordering(filters: StoreFilter) -> list:
    """ソート条件。同順位の並びを固定するため id を第2キーにする。"""
    sort_by = SortBy(filters.sort_by or DEFAULT_SORT_BY)
    sort_order = SortOrder(filters.sort_order or DEFAULT_SORT_ORDER)

    column = getattr(Store, sort_by.value)
    ordering = [column.desc() if sort_order == SortOrder.DESC else column.asc()]
    if sort_by != SortBy.ID:
        ordering.append(Store.id.asc())
    return ordering


class StoreService:
    """店舗情報サービス"""

    @staticmethod
    def find_all(db: Session, filters: StoreFilter = None) -> PaginatedResult[Store]:
        """
        店舗一覧を絞り込み・ソート・ページングして返す。

        件数と明細は同じ条件で別々に取得する（トランザクションで束ねない）。
        page / size は範囲外でもエラーにせず上下限に丸める。
        """
        filters = filters or StoreFilter()
        page = clamp_page(filters.page)
        size = clamp_size(filters.size)
        conditions = build_store_conditions(filters)

        total_count = db.query(func.count(Store.id)).filter(*conditions).scalar()
        items = (
            db.query(Store)
            .options(joinedload(Store.prefecture))
            .filter(*conditions)
            .order_by(*build_store_ordering(filters))
            .offset(page_offset(page, size))
            .limit(size)
            .all()
        )
        logger.debug(f"店舗一覧: filters={filters.model_dump(exclude_none=True)} total={total_count}")
        return PaginatedResult(items=items, total_count=total_count, page=page, size=size)

    @staticmethod
    def find_by_code_or_fail(db: Session, code: str) -> Store:
        store = (
            db.query(Store)
            .options(joinedload(Store.prefecture))
            .filter(Store.code == code)
            .first()
        )
        if store is None:
            logger.warning(f"店舗情報が存在しません: code={code}")
            raise NotFoundError(f"codeに該当する店舗情報が存在しません。 code: {code}")
        return store

    @staticmethod
    def create(db: Session, data: StoreCreate, user_id: int) -> Store:
        """
        店舗を登録する。

        prefecture_code が指定されていれば先に都道府県の存在を確認し、
        無ければ何も登録せずに NotFoundError とする。
        """
        prefecture_id = None
        if data.prefecture_code is not None:
            prefecture = db.query(Prefecture).filter(Prefecture.code == data.prefecture_code).first()
            if prefecture is None:
                logger.warning(f"都道府県情報が存在しません: prefecture_code={data.prefecture_code}")
                raise NotFoundError(
                    "prefecture_codeに該当する都道府県情報が存在しません。 "
                    f"prefecture_code: {data.prefecture_code}"
                )
            prefecture_id = prefecture.id

        store = Store(
            **data.model_dump(mode="json", exclude={"prefecture_code"}),
            prefecture_id=prefecture_id,
            user_id=user_id,
        )
        created = save(db, store, logger)
        logger.info(f"店舗を登録しました: id={created.id} user_id={user_id}")
        return created
