from md_html.models import BlockState, ScannerContext


def test_block_state_members():
    assert list(BlockState) == [
        BlockState.NORMAL,
        BlockState.IN_LIST,
        BlockState.IN_CODE_BLOCK,
        BlockState.IN_BLOCK_QUOTE,
    ]


def test_scanner_context_defaults():
    ctx = ScannerContext()

    assert ctx.in_list is False
    assert ctx.list_depth == 0
    assert ctx.in_code_block is False
    assert ctx.in_block_quote is False
    assert ctx.in_inline_code is False
    assert ctx.state is BlockState.NORMAL


def test_scanner_context_state_prefers_code_block():
    ctx = ScannerContext(in_list=True, in_code_block=True, in_block_quote=True)

    assert ctx.state is BlockState.IN_CODE_BLOCK


def test_scanner_context_state_prefers_list_over_block_quote():
    ctx = ScannerContext(in_list=True, list_depth=2, in_block_quote=True)

    assert ctx.state is BlockState.IN_LIST

    ctx.in_list = False
    ctx.list_depth = 0
    assert ctx.state is BlockState.IN_BLOCK_QUOTE
