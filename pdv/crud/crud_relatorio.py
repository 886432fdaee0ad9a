# pdv/crud/crud_relatorio.py
from collections import defaultdict
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Dict, List, Tuple

from sqlalchemy.orm import Session

from pdv.core.dinheiro import ZERO, quantizar_dinheiro, quantizar_quantidade
from pdv.core.exceptions import ArgumentoInvalidoError
from pdv.db.models.comanda import ItemComanda
from pdv.db.models.produto import Produto
from pdv.db.models.venda import Venda
from pdv.schemas.produto import ProdutoSchemas
from pdv.schemas.relatorio import ProdutoMaisVendido, RelatorioVendas, VendasPorDia

LIMITE_MAIS_VENDIDOS = 10


def _data_utc(momento: datetime) -> date:
    # SQLite devolve datetimes sem fuso (já em UTC); PostgreSQL devolve com fuso
    if momento.tzinfo is not None:
        momento = momento.astimezone(timezone.utc)
    return momento.date()


class CRUDRelatorio:
    def get_relatorio_vendas(self, db: Session, *, data_inicio: date, data_fim: date) -> RelatorioVendas:
        """
        Resumo das vendas cuja data (UTC, sem hora) está em [data_inicio, data_fim].

        Produtos mais vendidos: quantidade desc, empate por produto_id asc, no máximo 10.
        """
        if data_inicio > data_fim:
            raise ArgumentoInvalidoError("Data inicial não pode ser posterior à data final.")

        inicio = datetime.combine(data_inicio, time.min, tzinfo=timezone.utc)
        fim = datetime.combine(data_fim + timedelta(days=1), time.min, tzinfo=timezone.utc)
        vendas = (
            db.query(Venda)
            .filter(Venda.criada_em >= inicio, Venda.criada_em < fim)
            .order_by(Venda.criada_em, Venda.id)
            .all()
        )

        total_faturamento = sum((venda.valor_total for venda in vendas), ZERO)
        total_vendas = len(vendas)
        ticket_medio = total_faturamento / total_vendas if total_vendas else ZERO

        por_dia: Dict[date, Decimal] = defaultdict(lambda: ZERO)
        for venda in vendas:
            por_dia[_data_utc(venda.criada_em)] += venda.valor_total

        produtos_vendidos = Decimal("0")
        estatisticas: Dict[int, Tuple[Decimal, Decimal]] = {}
        for venda in vendas:
            itens = db.query(ItemComanda).filter(ItemComanda.comanda_id == venda.comanda_id).all()
            for item in itens:
                produtos_vendidos += item.quantidade
                quantidade, faturamento = estatisticas.get(item.produto_id, (Decimal("0"), ZERO))
                estatisticas[item.produto_id] = (quantidade + item.quantidade, faturamento + item.subtotal)

        ranking = sorted(estatisticas.items(), key=lambda par: (-par[1][0], par[0]))[:LIMITE_MAIS_VENDIDOS]

        return RelatorioVendas(
            periodo_inicio=data_inicio,
            periodo_fim=data_fim,
            total_faturamento=quantizar_dinheiro(total_faturamento),
            total_vendas=total_vendas,
            ticket_medio=quantizar_dinheiro(ticket_medio),
            produtos_vendidos=quantizar_quantidade(produtos_vendidos),
            vendas_por_dia=[
                VendasPorDia(data=dia, total=quantizar_dinheiro(total)) for dia, total in sorted(por_dia.items())
            ],
            produtos_mais_vendidos=self._montar_ranking(db, ranking),
        )

    def _montar_ranking(self, db: Session, ranking) -> List[ProdutoMaisVendido]:
        ids = [produto_id for produto_id, _ in ranking]
        produtos = {p.id: p for p in db.query(Produto).filter(Produto.id.in_(ids)).all()} if ids else {}

        resultado = []
        for produto_id, (quantidade, faturamento) in ranking:
            produto = produtos.get(produto_id)  # Pode ter sido excluído
            resultado.append(ProdutoMaisVendido(
                produto_id=produto_id,
                produto=ProdutoSchemas.model_validate(produto) if produto else None,
                quantidade=quantizar_quantidade(quantidade),
                faturamento=quantizar_dinheiro(faturamento),
            ))
        return resultado

relatorio = CRUDRelatorio()
