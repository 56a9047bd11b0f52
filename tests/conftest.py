"""
Pytest configuration and fixtures for kanaconv tests.
"""

import pytest


@pytest.fixture
def default_options():
    """Options with every flag disabled."""
    from kanaconv import ConversionOptions
    return ConversionOptions.build().finalize()


@pytest.fixture
def all_options():
    """Options with ascii, digit and kana conversion enabled."""
    from kanaconv import ConversionOptions
    return (
        ConversionOptions.build()
        .enable_ascii()
        .enable_digit()
        .enable_kana()
        .finalize()
    )


@pytest.fixture
def kana_options():
    """Options with only kana conversion enabled."""
    from kanaconv import ConversionOptions
    return ConversionOptions.build().enable_kana().finalize()


@pytest.fixture
def hiragana_text():
    """Every hiragana with a katakana counterpart, plus shared kana punctuation."""
    return (
        "ぁあぃいぅうぇえぉおかがきぎくぐけげこごさざしじすずせぜそぞ"
        "ただちぢっつづてでとどなにぬねのはばぱひびぴふぶぷへべぺほぼぽ"
        "まみむめもゃやゅゆょよらりるれろわをんーゎゐゑゕゖゔゝゞ・「」。、"
    )


@pytest.fixture
def full_kana_text():
    """Full-width katakana in the same order as hiragana_text."""
    return (
        "ァアィイゥウェエォオカガキギクグケゲコゴサザシジスズセゼソゾ"
        "タダチヂッツヅテデトドナニヌネノハバパヒビピフブプヘベペホボポ"
        "マミムメモャヤュユョヨラリルレロワヲンーヮヰヱヵヶヴヽヾ・「」。、"
    )


@pytest.fixture
def half_kana_text():
    """Half-width katakana in the same order as hiragana_text."""
    return (
        "ｧｱｨｲｩｳｪｴｫｵｶｶﾞｷｷﾞｸｸﾞｹｹﾞｺｺﾞｻｻﾞｼｼﾞｽｽﾞｾｾﾞｿｿﾞ"
        "ﾀﾀﾞﾁﾁﾞｯﾂﾂﾞﾃﾃﾞﾄﾄﾞﾅﾆﾇﾈﾉﾊﾊﾞﾊﾟﾋﾋﾞﾋﾟﾌﾌﾞﾌﾟﾍﾍﾞﾍﾟﾎﾎﾞﾎﾟ"
        "ﾏﾐﾑﾒﾓｬﾔｭﾕｮﾖﾗﾘﾙﾚﾛﾜｦﾝｰヮヰヱヵヶｳﾞヽヾ･｢｣｡､"
    )
