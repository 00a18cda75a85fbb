import os


# push / show / presentation に加えて "model" を受け付ける。
# Interface Builder が出力する "modal" とは別物かどうか判別できないため、
# 元の変換ツールの文字列をそのまま既定値にしている。
DEFAULT_FLOW_SEGUE_KINDS = ("push", "show", "presentation", "model")


class ConverterConfig:
    """
    変換全体の設定。

    既定値は元の変換ツールの挙動に合わせてある。
    出力先だけは環境変数 STORYBOARD2SWIFTUI_OUT でも指定できる。
    """

    def __init__(
        self,
        flow_segue_kinds=DEFAULT_FLOW_SEGUE_KINDS,
        placeholder_label_text="Welcome! Please login",
        min_top_padding=4,
        max_top_padding=32,
        default_tab_icon="house",
        output_folder_prefix="StoryboardConverter_",
        generated_dir_name="GeneratedSwiftUIFiles",
        output_root=None,
    ):
        self.flow_segue_kinds = tuple(flow_segue_kinds)
        self.placeholder_label_text = placeholder_label_text
        self.min_top_padding = min_top_padding
        self.max_top_padding = max_top_padding
        self.default_tab_icon = default_tab_icon
        self.output_folder_prefix = output_folder_prefix
        self.generated_dir_name = generated_dir_name
        # 引数が無ければ環境変数を見る
        self.output_root = output_root or os.getenv("STORYBOARD2SWIFTUI_OUT")
